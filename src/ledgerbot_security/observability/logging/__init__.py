"""Observability – structured logging helpers."""
from ledgerbot_security.observability.logging.filters import SensitiveFieldsFilter
from ledgerbot_security.observability.logging.factory import JsonLoggerFactory
from ledgerbot_security.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
