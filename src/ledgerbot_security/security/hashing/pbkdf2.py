"""Security – PBKDF2-HMAC-SHA512 credential hasher for PINs and passwords."""
from __future__ import annotations

import hashlib
import hmac
import os
import re

from ledgerbot_security.config.settings import CryptoSettings
from ledgerbot_security.kernel.errors import CredentialError
from ledgerbot_security.kernel.security import PasswordHasher

__all__ = ["Pbkdf2PasswordHasher"]

SALT_LENGTH = 16
HASH_LENGTH = 64
DIGEST = "sha512"
SEPARATOR = ":"

_VERIFIER_RE = re.compile(
    rf"(?P<salt>[0-9a-fA-F]{{{SALT_LENGTH * 2}}}){SEPARATOR}(?P<hash>[0-9a-fA-F]{{{HASH_LENGTH * 2}}})"
)


class Pbkdf2PasswordHasher(PasswordHasher):
    """Produces ``salt_hex:hash_hex`` verifiers.

    The salt is fed to PBKDF2 as its hex text, which is how verifiers already
    in the users table were produced.  The iteration count is a throughput
    throttle against offline guessing; tune it through
    ``CryptoSettings.pbkdf2_iterations``.
    """

    def __init__(self, settings: CryptoSettings | None = None) -> None:
        self._iterations = (settings or CryptoSettings()).pbkdf2_iterations

    @property
    def iterations(self) -> int:
        return self._iterations

    def hash(self, password: str) -> str:
        if not isinstance(password, str) or not password:
            raise CredentialError("Password must be a non-empty string")
        salt_hex = os.urandom(SALT_LENGTH).hex()
        return f"{salt_hex}{SEPARATOR}{self._derive(password, salt_hex).hex()}"

    def verify(self, password: str, hashed: str) -> bool:
        """Constant-time check of *password* against a stored verifier.

        Malformed verifiers and empty candidates are rejected with ``False``.
        """
        if not isinstance(password, str) or not password or not isinstance(hashed, str):
            return False
        match = _VERIFIER_RE.fullmatch(hashed)
        if match is None:
            return False
        expected = bytes.fromhex(match["hash"])
        candidate = self._derive(password, match["salt"])
        return hmac.compare_digest(candidate, expected)

    def _derive(self, password: str, salt_hex: str) -> bytes:
        return hashlib.pbkdf2_hmac(
            DIGEST,
            password.encode("utf-8"),
            salt_hex.encode("ascii"),
            self._iterations,
            dklen=HASH_LENGTH,
        )
