"""Shared fixtures: cheap KDF costs so the suite stays fast."""

from __future__ import annotations

import pytest

from ledgerbot_security.config.secrets import MasterSecret
from ledgerbot_security.config.settings import CryptoSettings
from ledgerbot_security.security import Pbkdf2PasswordHasher, ScryptAesGcmFieldCipher


@pytest.fixture
def fast_settings() -> CryptoSettings:
    return CryptoSettings(scrypt_n=1024, pbkdf2_iterations=1_000)


@pytest.fixture
def master_secret() -> MasterSecret:
    return MasterSecret.from_text("a" * 64)


@pytest.fixture
def cipher(master_secret: MasterSecret, fast_settings: CryptoSettings) -> ScryptAesGcmFieldCipher:
    return ScryptAesGcmFieldCipher(master_secret, fast_settings)


@pytest.fixture
def hasher(fast_settings: CryptoSettings) -> Pbkdf2PasswordHasher:
    return Pbkdf2PasswordHasher(fast_settings)
