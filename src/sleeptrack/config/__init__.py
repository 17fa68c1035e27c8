"""Runtime configuration."""

from sleeptrack.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
