"""Kernel security – keys whose values must never reach a log sink."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "pin", "secret", "master_secret", "encryption_key",
    "session_secret", "derived_key", "plaintext", "token", "api_key",
    "authorization", "verifier",
})


def is_sensitive(key: str, fields: frozenset[str] = DEFAULT_SENSITIVE_FIELDS) -> bool:
    """Case-insensitive membership test used by the log redactors."""
    return key.lower() in fields


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "is_sensitive"]
