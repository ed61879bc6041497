"""Root error class for the ledgerbot-security error hierarchy."""

from __future__ import annotations

import json
from typing import Any

from ledgerbot_security.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description. Must never embed key material,
            plaintext or credentials.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context. Keys listed in ``DEFAULT_SENSITIVE_FIELDS``
            are masked by :meth:`to_dict`.
        cause: Original exception that triggered this error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Return a single-line JSON rendering, safe for log sinks."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        detail = {
            k: ("***" if k.lower() in DEFAULT_SENSITIVE_FIELDS else v)
            for k, v in self.detail.items()
        }
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": detail,
        }
        if self.cause is not None:
            # type only: backend messages may quote input bytes
            payload["cause"] = type(self.cause).__name__
        return payload


__all__ = ["BaseError"]
