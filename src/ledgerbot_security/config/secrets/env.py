"""Config secrets – EnvMasterSecretProvider, StaticMasterSecretProvider."""
from __future__ import annotations

import os

from ledgerbot_security.config.secrets.port import MasterSecret, MasterSecretProvider


class EnvMasterSecretProvider(MasterSecretProvider):
    """Reads the secret from the process environment.

    ``persist`` only exports the value into ``os.environ``; it survives
    neither a restart nor a sibling process.
    """

    def load(self, name: str) -> MasterSecret | None:
        raw = os.environ.get(name)
        if not raw:
            return None
        return MasterSecret.from_text(raw)

    def persist(self, name: str, secret: MasterSecret) -> MasterSecret:
        os.environ[name] = secret.as_text()
        return secret


class StaticMasterSecretProvider(MasterSecretProvider):
    """Fixed in-memory secret, for tests and explicit injection."""

    def __init__(self, secret: MasterSecret | str | None = None) -> None:
        if isinstance(secret, str):
            secret = MasterSecret.from_text(secret)
        self._secret = secret
        self.persisted: list[str] = []

    def load(self, name: str) -> MasterSecret | None:  # noqa: ARG002
        return self._secret

    def persist(self, name: str, secret: MasterSecret) -> MasterSecret:
        self._secret = secret
        self.persisted.append(name)
        return secret


__all__ = ["EnvMasterSecretProvider", "StaticMasterSecretProvider"]
