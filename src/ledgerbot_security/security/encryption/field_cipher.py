from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from ledgerbot_security.config.secrets import MasterSecret
from ledgerbot_security.config.settings import CryptoSettings
from ledgerbot_security.kernel.errors import CipherError, DecryptionFailure, FailureReason
from ledgerbot_security.kernel.security import FieldCipher
from ledgerbot_security.kernel.types import Err, Ok, Result
from ledgerbot_security.observability.logging import get_logger
from ledgerbot_security.security.encryption.record import (
    IV_LENGTH,
    KEY_LENGTH,
    SALT_LENGTH,
    TAG_LENGTH,
    EncryptedRecord,
)

__all__ = ["ScryptAesGcmFieldCipher"]

_log = get_logger(__name__)


class ScryptAesGcmFieldCipher(FieldCipher):
    """AES-256-GCM field encryption under a per-record scrypt-derived key.

    Every call draws a fresh 64-byte salt and 16-byte IV, so the same
    plaintext never encrypts to the same record.  The derived key lives only
    for the duration of one call.  Safe to share between threads.
    """

    def __init__(self, secret: MasterSecret, settings: CryptoSettings | None = None) -> None:
        self._secret = secret
        self._settings = settings or CryptoSettings()

    def derive_key(self, salt: bytes) -> bytes:
        s = self._settings
        kdf = Scrypt(salt=salt, length=KEY_LENGTH, n=s.scrypt_n, r=s.scrypt_r, p=s.scrypt_p)
        return kdf.derive(self._secret.material)

    def encrypt(self, plaintext: str | None) -> str | None:
        """Return the hex record for *plaintext*, or ``None`` when it is empty.

        Raises:
            CipherError: the RNG or the crypto backend failed.
        """
        if not plaintext:
            return None
        try:
            salt = os.urandom(SALT_LENGTH)
            iv = os.urandom(IV_LENGTH)
            sealed = AESGCM(self.derive_key(salt)).encrypt(iv, plaintext.encode("utf-8"), None)
        except Exception as exc:  # noqa: BLE001 – re-raised as CipherError
            raise CipherError("Field encryption failed", cause=exc) from exc
        # AESGCM appends the tag; the stored layout puts it before the ciphertext
        record = EncryptedRecord(
            salt=salt,
            iv=iv,
            tag=sealed[-TAG_LENGTH:],
            ciphertext=sealed[:-TAG_LENGTH],
        )
        return record.to_hex()

    def open(self, record: str | None) -> Result[str, DecryptionFailure]:
        """Decrypt *record*, reporting why when it cannot be read.

        Never raises: tampering, a foreign key, bad hex and truncation all
        come back as ``Err`` and no partial plaintext is ever returned.
        """
        if not record:
            return Err(DecryptionFailure(FailureReason.EMPTY))
        try:
            parsed = EncryptedRecord.from_hex(record)
            key = self.derive_key(parsed.salt)
            data = AESGCM(key).decrypt(parsed.iv, parsed.ciphertext + parsed.tag, None)
            return Ok(data.decode("utf-8"))
        except DecryptionFailure as failure:
            return self._fail(failure)
        except InvalidTag as exc:
            return self._fail(DecryptionFailure(FailureReason.AUTHENTICATION_FAILED, cause=exc))
        except UnicodeDecodeError as exc:
            return self._fail(DecryptionFailure(FailureReason.INVALID_ENCODING, cause=exc))
        except Exception as exc:  # noqa: BLE001 – fail closed on untrusted input
            return self._fail(DecryptionFailure(FailureReason.MALFORMED, cause=exc))

    def _fail(self, failure: DecryptionFailure) -> Err[DecryptionFailure]:
        _log.warning("field_cipher.decrypt_failed", reason=failure.reason.value)
        return Err(failure)
