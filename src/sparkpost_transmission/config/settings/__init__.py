"""Config settings – environment-based configuration."""
from sparkpost_transmission.config.settings.base import Settings
from sparkpost_transmission.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from sparkpost_transmission.config.settings.transport import (
    EU_BASE_URL,
    GLOBAL_BASE_URL,
    REGION_BASE_URLS,
    TransportSettings,
)

__all__ = [
    "DotenvSettingsLoader",
    "EU_BASE_URL",
    "EnvSettingsLoader",
    "GLOBAL_BASE_URL",
    "REGION_BASE_URLS",
    "Settings",
    "SettingsLoader",
    "TransportSettings",
]
