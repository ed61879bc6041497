"""Security – EncryptedRecord wire format.

``hex(salt[64] ‖ iv[16] ‖ tag[16] ‖ ciphertext[N])``, lowercase.  The layout
is fixed: rows already stored in the ledger database depend on it.
"""
from __future__ import annotations

import dataclasses

from ledgerbot_security.kernel.errors import DecryptionFailure, FailureReason

SALT_LENGTH = 64
IV_LENGTH = 16
TAG_LENGTH = 16
KEY_LENGTH = 32

TAG_OFFSET = SALT_LENGTH + IV_LENGTH
CIPHERTEXT_OFFSET = TAG_OFFSET + TAG_LENGTH
MIN_RECORD_LENGTH = CIPHERTEXT_OFFSET


@dataclasses.dataclass(frozen=True)
class EncryptedRecord:
    """Parsed form of a stored field."""

    salt: bytes
    iv: bytes
    tag: bytes
    ciphertext: bytes

    def __post_init__(self) -> None:
        if len(self.salt) != SALT_LENGTH or len(self.iv) != IV_LENGTH or len(self.tag) != TAG_LENGTH:
            raise ValueError("salt, iv and tag must be 64, 16 and 16 bytes")

    def to_bytes(self) -> bytes:
        return self.salt + self.iv + self.tag + self.ciphertext

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    @classmethod
    def from_hex(cls, encoded: str) -> EncryptedRecord:
        """Slice a stored hex string at the fixed offsets.

        Raises:
            DecryptionFailure: ``MALFORMED`` for non-hex input, ``TOO_SHORT``
                when fewer than 96 bytes decode.
        """
        try:
            raw = bytes.fromhex(encoded)
        except (TypeError, ValueError) as exc:
            raise DecryptionFailure(FailureReason.MALFORMED, cause=exc) from exc
        if len(raw) < MIN_RECORD_LENGTH:
            raise DecryptionFailure(
                FailureReason.TOO_SHORT,
                detail={"length": len(raw), "minimum": MIN_RECORD_LENGTH},
            )
        return cls(
            salt=raw[:SALT_LENGTH],
            iv=raw[SALT_LENGTH:TAG_OFFSET],
            tag=raw[TAG_OFFSET:CIPHERTEXT_OFFSET],
            ciphertext=raw[CIPHERTEXT_OFFSET:],
        )


__all__ = [
    "CIPHERTEXT_OFFSET",
    "EncryptedRecord",
    "IV_LENGTH",
    "KEY_LENGTH",
    "MIN_RECORD_LENGTH",
    "SALT_LENGTH",
    "TAG_LENGTH",
    "TAG_OFFSET",
]
