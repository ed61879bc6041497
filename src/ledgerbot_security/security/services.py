"""Security – CryptoServices: one place that wires the secret into the primitives."""
from __future__ import annotations

import dataclasses

from ledgerbot_security.config.secrets import MasterSecretProvider, bootstrap_master_secret
from ledgerbot_security.config.settings import CryptoSettings
from ledgerbot_security.security.encryption import ScryptAesGcmFieldCipher
from ledgerbot_security.security.hashing import Pbkdf2PasswordHasher


@dataclasses.dataclass(frozen=True)
class CryptoServices:
    """The field cipher and credential hasher built from one configuration."""

    cipher: ScryptAesGcmFieldCipher
    hasher: Pbkdf2PasswordHasher
    settings: CryptoSettings

    @classmethod
    def from_provider(
        cls,
        provider: MasterSecretProvider,
        settings: CryptoSettings | None = None,
    ) -> CryptoServices:
        """Bootstrap the master secret once and build both components from it."""
        settings = settings or CryptoSettings()
        secret = bootstrap_master_secret(provider, settings)
        return cls(
            cipher=ScryptAesGcmFieldCipher(secret, settings),
            hasher=Pbkdf2PasswordHasher(settings),
            settings=settings,
        )


__all__ = ["CryptoServices"]
