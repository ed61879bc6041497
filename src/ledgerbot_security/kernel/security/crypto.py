"""Kernel security – PasswordHasher, FieldCipher ports."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ledgerbot_security.kernel.errors import DecryptionFailure
    from ledgerbot_security.kernel.types import Result


class PasswordHasher(abc.ABC):
    """Port: one-way password / PIN hashing."""

    @abc.abstractmethod
    def hash(self, password: str) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


class FieldCipher(abc.ABC):
    """Port: reversible, authenticated protection of short text fields."""

    @abc.abstractmethod
    def encrypt(self, plaintext: str | None) -> str | None: ...

    @abc.abstractmethod
    def open(self, record: str | None) -> Result[str, DecryptionFailure]: ...

    def decrypt(self, record: str | None) -> str | None:
        """Fail-closed form of :meth:`open`: any failure yields ``None``."""
        return self.open(record).unwrap_or(None)


__all__ = ["FieldCipher", "PasswordHasher"]
