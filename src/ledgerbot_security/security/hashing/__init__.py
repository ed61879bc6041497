"""Security – credential hashing."""
from ledgerbot_security.security.hashing.pbkdf2 import Pbkdf2PasswordHasher

__all__ = ["Pbkdf2PasswordHasher"]
