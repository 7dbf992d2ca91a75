"""
exceptions.py - Error Kinds
Common: Shared utilities and models
"""


class CryptoServiceError(Exception):
    """Base exception for the crypto service."""


class NullArgumentError(CryptoServiceError, TypeError):
    """Raised when a required argument is None."""


class InvalidFormatError(CryptoServiceError, ValueError):
    """Raised when a hex argument has the wrong length or non-hex characters."""


class CryptographicError(CryptoServiceError):
    """Raised when the cipher rejects its input (wrong key, corrupted data)."""
