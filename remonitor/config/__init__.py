"""Configuration module for remonitor."""

from remonitor.config.schema import Settings, get_settings

__all__ = ["Settings", "get_settings"]
