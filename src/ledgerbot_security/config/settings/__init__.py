"""Config settings – 12-factor env-based configuration."""
from ledgerbot_security.config.settings.base import Settings
from ledgerbot_security.config.settings.crypto import CryptoSettings
from ledgerbot_security.config.settings.factory import SettingsFactory
from ledgerbot_security.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    env_key_for,
)

__all__ = [
    "CryptoSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "env_key_for",
]
