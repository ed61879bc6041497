"""Observability – structured logging."""

from ledgerbot_security.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
