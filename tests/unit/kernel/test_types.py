"""Unit tests for the Result type."""

from __future__ import annotations

import pytest

from ledgerbot_security.kernel.errors import DecryptionFailure, FailureReason
from ledgerbot_security.kernel.types import Err, Ok


class TestOk:
    def test_accessors(self) -> None:
        ok = Ok("saldo")
        assert ok.is_ok() and not ok.is_err()
        assert ok.value == "saldo"
        assert ok.unwrap() == "saldo"
        assert ok.unwrap_or(None) == "saldo"

    def test_map(self) -> None:
        assert Ok("abc").map(str.upper) == Ok("ABC")

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)

    def test_repr_hides_value(self) -> None:
        assert "plaintext" not in repr(Ok("plaintext"))


class TestErr:
    def test_accessors(self) -> None:
        failure = DecryptionFailure(FailureReason.TOO_SHORT)
        err = Err(failure)
        assert err.is_err() and not err.is_ok()
        assert err.error is failure
        assert err.unwrap_or(None) is None

    def test_unwrap_raises_error(self) -> None:
        with pytest.raises(DecryptionFailure):
            Err(DecryptionFailure(FailureReason.MALFORMED)).unwrap()

    def test_map_is_noop(self) -> None:
        err = Err(DecryptionFailure(FailureReason.MALFORMED))
        assert err.map(str.upper) is err


class TestPatternMatching:
    @pytest.mark.parametrize(
        "result, expected",
        [
            (Ok("100"), "value:100"),
            (Err(DecryptionFailure(FailureReason.EMPTY)), "absent"),
            (Err(DecryptionFailure(FailureReason.AUTHENTICATION_FAILED)), "unavailable"),
        ],
    )
    def test_match(self, result, expected: str) -> None:
        match result:
            case Ok(value):
                outcome = f"value:{value}"
            case Err(failure) if failure.is_absent:
                outcome = "absent"
            case Err(_):
                outcome = "unavailable"
        assert outcome == expected
