"""Module de configuration."""

from netrc_utils.config.loader import (
    FileSettingsLoader,
    SettingsLoader,
    load_settings,
)
from netrc_utils.config.settings import LoggingSettings, NetrcSettings

__all__ = [
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
    "LoggingSettings",
    "NetrcSettings",
]
