"""Config settings – 12-factor env-based configuration."""
from kv_keystore.config.settings.base import Settings
from kv_keystore.config.settings.factory import SettingsFactory
from kv_keystore.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
