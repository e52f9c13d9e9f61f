"""Persistence for the last-used monitor placement."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from remonitor.config import get_settings

NO_MONITOR = -1


@dataclass(frozen=True)
class PlacementConfig:
    """Stored monitor preference."""

    monitor_index: int = NO_MONITOR
    fullscreen: bool = False

    def to_payload(self) -> dict:
        return {"monitorIndex": self.monitor_index, "fullscreen": self.fullscreen}

    @classmethod
    def from_payload(cls, payload: object) -> PlacementConfig | None:
        """Build a config from decoded JSON, or ``None`` when the shape is wrong.

        Missing fields fall back to their defaults; present fields must have
        the right type.
        """
        if not isinstance(payload, dict):
            return None

        index = payload.get("monitorIndex", NO_MONITOR)
        fullscreen = payload.get("fullscreen", False)
        # bool is a subclass of int
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if not isinstance(fullscreen, bool):
            return None
        return cls(monitor_index=index, fullscreen=fullscreen)


def default_store_path() -> Path:
    """Return default path for the persisted placement record."""
    return get_settings().config_path


class ConfigStore:
    """Loads and saves one :class:`PlacementConfig` at a fixed path."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = Path(path) if path is not None else default_store_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PlacementConfig | None:
        """Load the saved placement; ``None`` when absent or unreadable."""
        if not self._path.is_file():
            logger.debug("No saved placement at {}", self._path)
            return None

        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError, RecursionError) as exc:
            logger.warning("Ignoring unreadable placement file {}: {}", self._path, exc)
            return None

        config = PlacementConfig.from_payload(payload)
        if config is None:
            logger.warning("Ignoring malformed placement file {}", self._path)
        return config

    def save(self, config: PlacementConfig) -> bool:
        """Persist the placement, overwriting any previous record."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(config.to_payload(), indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Failed to persist placement: {}", exc)
            return False
        logger.debug("Saved placement {} to {}", config, self._path)
        return True

    def clear(self) -> bool:
        """Remove the saved placement, if any."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Failed to remove placement file {}: {}", self._path, exc)
            return False
        return True
