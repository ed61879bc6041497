"""Security – event-loop friendly wrappers around the KDF-bound primitives.

scrypt and PBKDF2 each burn tens of milliseconds of CPU.  On an asyncio
loop (the WhatsApp message handler) every call is pushed to a worker thread
with :func:`asyncio.to_thread`; ``max_concurrency`` caps how many run at once.
"""
from __future__ import annotations

import asyncio
from typing import Callable, TypeVar

from ledgerbot_security.kernel.errors import DecryptionFailure
from ledgerbot_security.kernel.security import FieldCipher, PasswordHasher
from ledgerbot_security.kernel.types import Result

T = TypeVar("T")


class _Offloader:
    def __init__(self, max_concurrency: int | None) -> None:
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def _run(self, func: Callable[..., T], *args: object) -> T:
        if self._semaphore is None:
            return await asyncio.to_thread(func, *args)
        async with self._semaphore:
            return await asyncio.to_thread(func, *args)


class AsyncFieldCipher(_Offloader):
    """Async facade over a :class:`FieldCipher`."""

    def __init__(self, cipher: FieldCipher, max_concurrency: int | None = None) -> None:
        super().__init__(max_concurrency)
        self._cipher = cipher

    async def encrypt(self, plaintext: str | None) -> str | None:
        return await self._run(self._cipher.encrypt, plaintext)

    async def open(self, record: str | None) -> Result[str, DecryptionFailure]:
        return await self._run(self._cipher.open, record)

    async def decrypt(self, record: str | None) -> str | None:
        return await self._run(self._cipher.decrypt, record)


class AsyncPasswordHasher(_Offloader):
    """Async facade over a :class:`PasswordHasher`."""

    def __init__(self, hasher: PasswordHasher, max_concurrency: int | None = None) -> None:
        super().__init__(max_concurrency)
        self._hasher = hasher

    async def hash(self, password: str) -> str:
        return await self._run(self._hasher.hash, password)

    async def verify(self, password: str, hashed: str) -> bool:
        return await self._run(self._hasher.verify, password, hashed)


__all__ = ["AsyncFieldCipher", "AsyncPasswordHasher"]
