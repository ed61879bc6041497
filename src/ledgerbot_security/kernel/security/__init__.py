"""Kernel security – sensitive-field registry and crypto ports."""
from ledgerbot_security.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS, is_sensitive
from ledgerbot_security.kernel.security.crypto import FieldCipher, PasswordHasher

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "FieldCipher",
    "PasswordHasher",
    "is_sensitive",
]
