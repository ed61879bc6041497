"""Config secrets – master secret value object, providers and bootstrap."""
from ledgerbot_security.config.secrets.port import MasterSecret, MasterSecretProvider
from ledgerbot_security.config.secrets.env import EnvMasterSecretProvider, StaticMasterSecretProvider
from ledgerbot_security.config.secrets.dotenv_file import DotenvMasterSecretProvider, exclusive_lock
from ledgerbot_security.config.secrets.bootstrap import bootstrap_master_secret

__all__ = [
    "DotenvMasterSecretProvider",
    "EnvMasterSecretProvider",
    "MasterSecret",
    "MasterSecretProvider",
    "StaticMasterSecretProvider",
    "bootstrap_master_secret",
    "exclusive_lock",
]
