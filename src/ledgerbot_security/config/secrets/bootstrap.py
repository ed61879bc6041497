"""Config secrets – one-time master secret bootstrap."""
from __future__ import annotations

from ledgerbot_security.config.secrets.port import MasterSecret, MasterSecretProvider
from ledgerbot_security.config.settings import CryptoSettings
from ledgerbot_security.observability.logging import get_logger

_log = get_logger(__name__)


def bootstrap_master_secret(
    provider: MasterSecretProvider,
    settings: CryptoSettings | None = None,
) -> MasterSecret:
    """Load the master secret, generating and persisting one when absent.

    Call once at process start and hand the result to every
    :class:`~ledgerbot_security.security.encryption.ScryptAesGcmFieldCipher`.
    A missing secret is recoverable and only warned about; a failure to
    persist the replacement propagates as ``SecretProviderError``.
    """
    settings = settings or CryptoSettings()
    name = settings.secret_env_var

    secret = provider.load(name)
    if secret is not None:
        if len(secret) < settings.min_secret_length:
            _log.warning(
                "master_secret.weak",
                name=name,
                length=len(secret),
                recommended=settings.min_secret_length,
            )
        return secret

    _log.warning("master_secret.generated", name=name, provider=type(provider).__name__)
    return provider.persist(name, MasterSecret.generate(settings.generated_secret_bytes))


__all__ = ["bootstrap_master_secret"]
