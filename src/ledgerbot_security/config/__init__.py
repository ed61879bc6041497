"""Config – crypto settings, loaders, and master secret providers."""

from ledgerbot_security.config.settings import (
    CryptoSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from ledgerbot_security.config.secrets import (
    DotenvMasterSecretProvider,
    EnvMasterSecretProvider,
    MasterSecret,
    MasterSecretProvider,
    StaticMasterSecretProvider,
    bootstrap_master_secret,
)
from ledgerbot_security.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "CryptoSettings",
    "DotenvMasterSecretProvider",
    "DotenvSettingsLoader",
    "EnvMasterSecretProvider",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MasterSecret",
    "MasterSecretProvider",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "StaticMasterSecretProvider",
    "bootstrap_master_secret",
]
