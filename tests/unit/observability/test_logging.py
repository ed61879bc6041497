"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from ledgerbot_security.kernel.security import DEFAULT_SENSITIVE_FIELDS
from ledgerbot_security.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        result = SensitiveFieldsFilter().redact({"pin": "123456", "user": "budi"})
        assert result == {"pin": SensitiveFieldsFilter.REDACTED, "user": "budi"}

    def test_redacts_all_default_fields(self) -> None:
        result = SensitiveFieldsFilter().redact({f: "v" for f in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive(self) -> None:
        result = SensitiveFieldsFilter().redact({"ENCRYPTION_KEY": "x"})
        assert result["ENCRYPTION_KEY"] == SensitiveFieldsFilter.REDACTED

    def test_redact_deep(self) -> None:
        data = {"user": {"password": "p", "name": "n"}, "items": [{"secret": "s"}, 3]}
        result = SensitiveFieldsFilter().redact_deep(data)
        assert result["user"] == {"password": SensitiveFieldsFilter.REDACTED, "name": "n"}
        assert result["items"] == [{"secret": SensitiveFieldsFilter.REDACTED}, 3]

    def test_custom_fields(self) -> None:
        result = SensitiveFieldsFilter(frozenset({"nik"})).redact({"nik": "1", "pin": "2"})
        assert result == {"nik": SensitiveFieldsFilter.REDACTED, "pin": "2"}

    def test_usable_as_processor(self) -> None:
        event = SensitiveFieldsFilter()(None, "info", {"event": "login", "pin": "1"})
        assert event == {"event": "login", "pin": SensitiveFieldsFilter.REDACTED}


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test", component="cipher").info("hello")
        assert logs == [{"event": "hello", "component": "cipher", "log_level": "info"}]


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self) -> Iterator[None]:
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_emits_json_with_secrets_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.get_logger("ledger").warning("master_secret.generated", encryption_key="abc")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "master_secret.generated"
        assert payload["encryption_key"] == SensitiveFieldsFilter.REDACTED
        assert payload["level"] == "warning"

    def test_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        assert logging.getLogger().level == logging.DEBUG
