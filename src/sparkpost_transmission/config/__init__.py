"""Config – settings loaders and configuration errors."""
from sparkpost_transmission.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    TransportSettings,
)
from sparkpost_transmission.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "TransportSettings",
]
