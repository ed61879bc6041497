"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── CryptoError              (crypto.py)
    │   ├── CipherError
    │   ├── DecryptionFailure    (carried in Err, never raised by decrypt)
    │   ├── CredentialError
    │   └── SecretProviderError
    └── ConfigError              (config/validation/errors.py)
"""

from ledgerbot_security.kernel.errors.base import BaseError
from ledgerbot_security.kernel.errors.crypto import (
    CipherError,
    CredentialError,
    CryptoError,
    DecryptionFailure,
    FailureReason,
    SecretProviderError,
)

__all__ = [
    "BaseError",
    "CipherError",
    "CredentialError",
    "CryptoError",
    "DecryptionFailure",
    "FailureReason",
    "SecretProviderError",
]
