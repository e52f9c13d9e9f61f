"""Runtime settings for remonitor."""

from __future__ import annotations

from pathlib import Path

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


def _default_config_dir() -> Path:
    return Path.home() / ".remonitor"


class Settings(BaseSettings):
    """Root settings, overridable through ``REMONITOR_*`` environment variables."""

    config_dir: Path = Field(default_factory=_default_config_dir)
    filename: str = "remonitor.json"
    log_level: str = "WARNING"

    @property
    def config_path(self) -> Path:
        """Get expanded path of the persisted placement record."""
        return Path(self.config_dir).expanduser() / self.filename

    model_config = ConfigDict(
        env_prefix="REMONITOR_",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
