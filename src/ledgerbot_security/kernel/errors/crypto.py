"""Crypto errors — cipher, credential and master-secret failures."""

from __future__ import annotations

import enum
from typing import Any

from ledgerbot_security.kernel.errors.base import BaseError


class FailureReason(enum.StrEnum):
    """Why a stored record could not be opened."""

    EMPTY = "empty"
    MALFORMED = "malformed"
    TOO_SHORT = "too_short"
    AUTHENTICATION_FAILED = "authentication_failed"
    INVALID_ENCODING = "invalid_encoding"


class CryptoError(BaseError):
    """Base for every error raised by the cipher and hasher."""

    default_code = "crypto_error"


class CipherError(CryptoError):
    """Encryption could not be performed (RNG or backend fault).

    Always fatal: it signals a broken environment, not bad input.
    """

    default_code = "cipher_error"


class DecryptionFailure(CryptoError):
    """A record could not be opened.

    Carried inside :class:`~ledgerbot_security.kernel.types.Err` by
    ``FieldCipher.open``; it is never raised past the cipher boundary.
    """

    default_code = "decryption_failed"

    def __init__(
        self,
        reason: FailureReason,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Record unavailable: {reason.value}", **kwargs)
        self.reason = reason

    @property
    def is_absent(self) -> bool:
        """``True`` when there was nothing to decrypt, as opposed to a bad record."""
        return self.reason is FailureReason.EMPTY

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["reason"] = self.reason.value
        return base


class CredentialError(CryptoError):
    """Invalid input to the credential hasher (e.g. an empty password)."""

    default_code = "credential_error"


class SecretProviderError(CryptoError):
    """The master secret could not be loaded or persisted."""

    default_code = "secret_provider_error"

    def __init__(
        self,
        message: str,
        *,
        provider: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.provider = provider


__all__ = [
    "CipherError",
    "CredentialError",
    "CryptoError",
    "DecryptionFailure",
    "FailureReason",
    "SecretProviderError",
]
