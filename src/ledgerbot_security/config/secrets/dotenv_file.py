"""Config secrets – DotenvMasterSecretProvider.

Persists a generated master secret into a ``.env`` file so the next process
start reuses it.  Writers serialise on an exclusive lock taken on a sidecar
``<env_file>.lock`` file; the ``.env`` itself is rewritten by python-dotenv.
"""
from __future__ import annotations

import contextlib
import os
import pathlib
from typing import Iterator

from dotenv import dotenv_values, set_key

from ledgerbot_security.config.secrets.port import MasterSecret, MasterSecretProvider
from ledgerbot_security.kernel.errors import SecretProviderError
from ledgerbot_security.observability.logging import get_logger

if os.name == "nt":
    import msvcrt
else:
    import fcntl

_log = get_logger(__name__)


@contextlib.contextmanager
def exclusive_lock(lock_path: pathlib.Path) -> Iterator[None]:
    """Hold an inter-process exclusive lock on *lock_path* (blocking)."""
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    with open(lock_path, "a+", encoding="utf-8") as handle:
        if os.name == "nt":
            handle.seek(0)
            msvcrt.locking(handle.fileno(), msvcrt.LK_LOCK, 1)
        else:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
        try:
            yield
        finally:
            if os.name == "nt":
                handle.seek(0)
                msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)
            else:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)


class DotenvMasterSecretProvider(MasterSecretProvider):
    """Environment first, then a ``.env`` file; persists into that file."""

    def __init__(self, env_file: str | os.PathLike[str] = ".env") -> None:
        self._path = pathlib.Path(env_file)
        self._lock_path = self._path.with_name(self._path.name + ".lock")

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def load(self, name: str) -> MasterSecret | None:
        raw = os.environ.get(name) or self._read(name)
        if not raw:
            return None
        return MasterSecret.from_text(raw)

    def persist(self, name: str, secret: MasterSecret) -> MasterSecret:
        try:
            with exclusive_lock(self._lock_path):
                existing = self._read(name)
                if existing:
                    # another process won the race; its secret is authoritative
                    _log.info("master_secret.adopted", name=name, env_file=str(self._path))
                    return MasterSecret.from_text(existing)
                self._path.touch(mode=0o600, exist_ok=True)
                set_key(str(self._path), name, secret.as_text(), quote_mode="never")
        except OSError as exc:
            raise SecretProviderError(
                f"Could not persist {name} to {self._path}",
                provider=type(self).__name__,
                cause=exc,
            ) from exc
        _log.info("master_secret.persisted", name=name, env_file=str(self._path))
        return secret

    def _read(self, name: str) -> str | None:
        if not self._path.exists():
            return None
        return dotenv_values(self._path).get(name) or None


__all__ = ["DotenvMasterSecretProvider", "exclusive_lock"]
