"""Config package."""

from feedkit.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
