"""Config secrets – MasterSecret value object and MasterSecretProvider port."""
from __future__ import annotations

import abc
import dataclasses
import secrets


@dataclasses.dataclass(frozen=True)
class MasterSecret:
    """Process-wide key material for the field cipher.

    Immutable once built; ``repr`` and ``str`` never reveal the bytes.
    """

    material: bytes = dataclasses.field(repr=False)

    def __post_init__(self) -> None:
        if not self.material:
            raise ValueError("Master secret must not be empty")

    @classmethod
    def from_text(cls, value: str) -> MasterSecret:
        return cls(value.encode("utf-8"))

    @classmethod
    def generate(cls, num_bytes: int = 32) -> MasterSecret:
        """Fresh CSPRNG secret, hex-rendered so it can live in a ``.env`` file."""
        return cls.from_text(secrets.token_hex(num_bytes))

    def as_text(self) -> str:
        return self.material.decode("utf-8")

    def __len__(self) -> int:
        return len(self.material)

    def __str__(self) -> str:
        return "MasterSecret(***)"


class MasterSecretProvider(abc.ABC):
    """Port: load and persist the master secret under a variable name."""

    @abc.abstractmethod
    def load(self, name: str) -> MasterSecret | None: ...

    @abc.abstractmethod
    def persist(self, name: str, secret: MasterSecret) -> MasterSecret:
        """Store *secret*; return the value that is persisted afterwards."""


__all__ = ["MasterSecret", "MasterSecretProvider"]
