"""
crypto_server.py - Server-side Cryptographic Helpers

The server holds a single key, taken from its configuration. The service for
that key is built once and shared by every request.
"""

from functools import lru_cache
from typing import Optional

from common.crypto_service import CryptoService


@lru_cache(maxsize=4)
def build_service(encryption_key: Optional[str]) -> Optional[CryptoService]:
    """Return the CryptoService for *encryption_key*, or None if no key is configured."""
    if not encryption_key:
        return None
    return CryptoService(encryption_key)


__all__ = ["build_service", "CryptoService"]
