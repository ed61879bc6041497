"""Config settings – CryptoSettings (tunable KDF cost knobs)."""
from __future__ import annotations

import dataclasses

from ledgerbot_security.config.settings.base import Settings
from ledgerbot_security.config.validation import InvalidSettingValueError

# Node's crypto.scryptSync defaults; stored records were derived with these.
DEFAULT_SCRYPT_N = 16384
DEFAULT_SCRYPT_R = 8
DEFAULT_SCRYPT_P = 1
DEFAULT_PBKDF2_ITERATIONS = 100_000
MIN_GENERATED_SECRET_BYTES = 32


@dataclasses.dataclass(frozen=True)
class CryptoSettings(Settings):
    """Cost parameters for the field cipher and credential hasher.

    Read from ``LEDGER_CRYPTO_*`` environment variables by
    :class:`~ledgerbot_security.config.settings.EnvSettingsLoader`.
    Wire-format lengths are deliberately not configurable.
    """

    _prefix: dataclasses.ClassVar[str] = "LEDGER_CRYPTO"

    scrypt_n: int = DEFAULT_SCRYPT_N
    scrypt_r: int = DEFAULT_SCRYPT_R
    scrypt_p: int = DEFAULT_SCRYPT_P
    pbkdf2_iterations: int = DEFAULT_PBKDF2_ITERATIONS
    generated_secret_bytes: int = MIN_GENERATED_SECRET_BYTES
    min_secret_length: int = 32
    secret_env_var: str = "ENCRYPTION_KEY"

    def _validate(self) -> None:
        n = self.scrypt_n
        if n <= 1 or n & (n - 1):
            raise InvalidSettingValueError("scrypt_n", n, "must be a power of two greater than 1")
        if self.scrypt_r < 1:
            raise InvalidSettingValueError("scrypt_r", self.scrypt_r, "must be >= 1")
        if self.scrypt_p < 1:
            raise InvalidSettingValueError("scrypt_p", self.scrypt_p, "must be >= 1")
        if self.pbkdf2_iterations < 1:
            raise InvalidSettingValueError(
                "pbkdf2_iterations", self.pbkdf2_iterations, "must be >= 1"
            )
        if self.generated_secret_bytes < MIN_GENERATED_SECRET_BYTES:
            raise InvalidSettingValueError(
                "generated_secret_bytes",
                self.generated_secret_bytes,
                f"must be >= {MIN_GENERATED_SECRET_BYTES}",
            )
        if self.min_secret_length < 0:
            raise InvalidSettingValueError("min_secret_length", self.min_secret_length, "must be >= 0")
        if not self.secret_env_var.strip():
            raise InvalidSettingValueError("secret_env_var", self.secret_env_var, "must not be blank")


__all__ = [
    "DEFAULT_PBKDF2_ITERATIONS",
    "DEFAULT_SCRYPT_N",
    "DEFAULT_SCRYPT_P",
    "DEFAULT_SCRYPT_R",
    "CryptoSettings",
]
