"""Security — field encryption and credential hashing."""
from ledgerbot_security.security.encryption import (
    MIN_RECORD_LENGTH,
    EncryptedRecord,
    ScryptAesGcmFieldCipher,
)
from ledgerbot_security.security.hashing import Pbkdf2PasswordHasher
from ledgerbot_security.security.offload import AsyncFieldCipher, AsyncPasswordHasher
from ledgerbot_security.security.services import CryptoServices

__all__ = [
    "AsyncFieldCipher",
    "AsyncPasswordHasher",
    "CryptoServices",
    "EncryptedRecord",
    "MIN_RECORD_LENGTH",
    "Pbkdf2PasswordHasher",
    "ScryptAesGcmFieldCipher",
]
