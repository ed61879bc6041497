"""Kernel – framework-agnostic errors, result type and crypto ports."""

from ledgerbot_security.kernel.errors import (
    BaseError,
    CipherError,
    CredentialError,
    CryptoError,
    DecryptionFailure,
    FailureReason,
    SecretProviderError,
)
from ledgerbot_security.kernel.types import Err, Ok, Result

__all__ = [
    "BaseError",
    "CipherError",
    "CredentialError",
    "CryptoError",
    "DecryptionFailure",
    "Err",
    "FailureReason",
    "Ok",
    "Result",
    "SecretProviderError",
]
