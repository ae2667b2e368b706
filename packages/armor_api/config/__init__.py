"""Public API for armor_api configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ArmorSettings,
    LoggingSettings,
    ServerSettings,
)
from .provider import DebugLevelSource, StaticDebugLevel

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ArmorSettings",
    "DebugLevelSource",
    "LoggingSettings",
    "ServerSettings",
    "StaticDebugLevel",
    "load_settings",
]
