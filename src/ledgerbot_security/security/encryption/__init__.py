"""Security – field encryption."""
from ledgerbot_security.security.encryption.field_cipher import ScryptAesGcmFieldCipher
from ledgerbot_security.security.encryption.record import MIN_RECORD_LENGTH, EncryptedRecord

__all__ = [
    "EncryptedRecord",
    "MIN_RECORD_LENGTH",
    "ScryptAesGcmFieldCipher",
]
