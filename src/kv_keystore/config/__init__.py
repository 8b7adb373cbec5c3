"""Config – 12-factor settings and their validation errors."""

from kv_keystore.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from kv_keystore.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
