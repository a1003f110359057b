"""
Le Jeu du 5000 Configuration.

Environment variables, settings storage, and logging configuration.
"""

from src.config.repository import (
    GameSettingsRecord,
    InMemorySettingsRepository,
    JsonFileSettingsRepository,
    SettingsRepository,
    build_settings_repository,
    get_settings_repository,
)
from src.config.settings import Settings, configure_logging, get_settings

__all__ = [
    "GameSettingsRecord",
    "InMemorySettingsRepository",
    "JsonFileSettingsRepository",
    "Settings",
    "SettingsRepository",
    "build_settings_repository",
    "configure_logging",
    "get_settings",
    "get_settings_repository",
]
