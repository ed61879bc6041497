"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from ledgerbot_security.config.validation import ConfigError
from ledgerbot_security.kernel.errors import (
    BaseError,
    CipherError,
    CredentialError,
    CryptoError,
    DecryptionFailure,
    FailureReason,
    SecretProviderError,
)


class TestBaseError:
    def test_message_and_default_code(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert err.code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_masks_sensitive_detail(self) -> None:
        err = BaseError("m", detail={"Encryption_Key": "deadbeef", "field": "saldo"})
        assert err.to_dict()["detail"] == {"Encryption_Key": "***", "field": "saldo"}

    def test_cause_rendered_as_type_only(self) -> None:
        cause = ValueError("non-hexadecimal number found in fromhex() arg at position 7")
        err = BaseError("wrapper", cause=cause)
        assert err.to_dict()["cause"] == "ValueError"
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestCryptoErrors:
    @pytest.mark.parametrize(
        "cls, code",
        [
            (CryptoError, "crypto_error"),
            (CipherError, "cipher_error"),
            (CredentialError, "credential_error"),
        ],
    )
    def test_codes(self, cls: type[CryptoError], code: str) -> None:
        err = cls("x")
        assert err.code == code
        assert isinstance(err, BaseError)

    def test_decryption_failure_carries_reason(self) -> None:
        err = DecryptionFailure(FailureReason.AUTHENTICATION_FAILED)
        assert err.reason is FailureReason.AUTHENTICATION_FAILED
        assert err.code == "decryption_failed"
        assert err.to_dict()["reason"] == "authentication_failed"
        assert "authentication_failed" in err.message
        assert isinstance(err, CryptoError)

    def test_only_empty_is_absent(self) -> None:
        assert DecryptionFailure(FailureReason.EMPTY).is_absent
        for reason in FailureReason:
            if reason is not FailureReason.EMPTY:
                assert not DecryptionFailure(reason).is_absent

    def test_secret_provider_error(self) -> None:
        err = SecretProviderError("disk full", provider="DotenvMasterSecretProvider")
        assert err.provider == "DotenvMasterSecretProvider"
        assert err.code == "secret_provider_error"

    def test_config_error_is_base_error(self) -> None:
        assert isinstance(ConfigError("bad"), BaseError)
        assert not isinstance(ConfigError("bad"), CryptoError)
