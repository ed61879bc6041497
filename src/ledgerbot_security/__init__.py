"""
ledgerbot_security – field encryption and credential hashing for the ledger bot.

Import path convention::

    from ledgerbot_security.config import CryptoSettings, DotenvMasterSecretProvider
    from ledgerbot_security.security import CryptoServices, ScryptAesGcmFieldCipher
    from ledgerbot_security.kernel import Ok, Err, FailureReason
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
