"""Unit tests for kernel security ports and the sensitive-field registry."""

from __future__ import annotations

import pytest

from ledgerbot_security.kernel.errors import DecryptionFailure, FailureReason
from ledgerbot_security.kernel.security import (
    DEFAULT_SENSITIVE_FIELDS,
    FieldCipher,
    PasswordHasher,
    is_sensitive,
)
from ledgerbot_security.kernel.types import Err, Ok, Result


class _ReversingCipher(FieldCipher):
    def encrypt(self, plaintext: str | None) -> str | None:
        return plaintext[::-1] if plaintext else None

    def open(self, record: str | None) -> Result[str, DecryptionFailure]:
        if not record:
            return Err(DecryptionFailure(FailureReason.EMPTY))
        if record.startswith("!"):
            return Err(DecryptionFailure(FailureReason.MALFORMED))
        return Ok(record[::-1])


class TestFieldCipherPort:
    def test_decrypt_unwraps_ok(self) -> None:
        assert _ReversingCipher().decrypt("cba") == "abc"

    @pytest.mark.parametrize("record", [None, "", "!bad"])
    def test_decrypt_collapses_err_to_none(self, record: str | None) -> None:
        assert _ReversingCipher().decrypt(record) is None

    def test_ports_are_abstract(self) -> None:
        with pytest.raises(TypeError):
            FieldCipher()  # type: ignore[abstract]
        with pytest.raises(TypeError):
            PasswordHasher()  # type: ignore[abstract]


class TestSensitiveFields:
    @pytest.mark.parametrize("key", ["pin", "PASSWORD", "Encryption_Key", "master_secret"])
    def test_sensitive(self, key: str) -> None:
        assert is_sensitive(key)

    def test_ordinary_keys_pass(self) -> None:
        assert not is_sensitive("reason")
        assert not is_sensitive("name")

    def test_custom_registry(self) -> None:
        assert is_sensitive("nik", frozenset({"nik"}))
        assert "pin" in DEFAULT_SENSITIVE_FIELDS
