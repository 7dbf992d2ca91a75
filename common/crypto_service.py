"""
crypto_service.py - Encryption, Hashing & Entropy
Common: Shared utilities and models

Provides:
  - AES-256-CBC encryption / decryption with caller-visible IVs ("salts")
  - SHA-256 hashing (uppercase hex)
  - Shannon entropy of a string

NOTE: CBC gives confidentiality only. There is no integrity check, so a wrong
salt silently corrupts the first block instead of raising.
"""

import os
import hashlib
import logging
from collections import Counter
from math import log2
from typing import Optional, Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from common.exceptions import CryptographicError, InvalidFormatError, NullArgumentError
from common.hexcodec import hex_decode, hex_encode

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────
# CONSTANTS
# ─────────────────────────────────────────────
KEY_LEN        = 32                 # 256 bits for AES-256
VECTOR_LEN     = 16                 # one AES block
KEY_HEX_LEN    = KEY_LEN * 2
VECTOR_HEX_LEN = VECTOR_LEN * 2
BLOCK_BITS     = algorithms.AES.block_size


# ─────────────────────────────────────────────
# VECTOR HELPERS
# ─────────────────────────────────────────────
def generate_vector() -> bytes:
    """Return a fresh random 16-byte IV."""
    return os.urandom(VECTOR_LEN)


def _parse_vector(salt: str) -> bytes:
    if len(salt) != VECTOR_HEX_LEN:
        raise InvalidFormatError(f"Salt must be a {VECTOR_HEX_LEN} character hex string")
    return hex_decode(salt)


class CryptoService:
    """Encrypts and decrypts strings under one fixed 256-bit key."""

    def __init__(self, encryption_key: str):
        if encryption_key is None:
            raise NullArgumentError("encryption_key is required")
        if len(encryption_key) != KEY_HEX_LEN:
            raise InvalidFormatError(f"Encryption key must be a {KEY_HEX_LEN} character hex string")
        self._key = hex_decode(encryption_key)

    def _cipher(self, vector: bytes) -> Cipher:
        return Cipher(algorithms.AES(self._key), modes.CBC(vector))

    # ─────────────────────────────────────────
    # ENCRYPT / DECRYPT
    # ─────────────────────────────────────────
    def encrypt(self, plain_text: str, salt: Optional[str] = None) -> Tuple[str, str]:
        """
        Encrypt *plain_text* and return (cipher_text, salt) as hex strings.

        When *salt* is None a fresh random IV is used. Passing a previously
        returned salt reproduces the same cipher text for the same plain text.
        """
        if plain_text is None:
            raise NullArgumentError("plain_text is required")
        vector = generate_vector() if salt is None else _parse_vector(salt)

        padder = padding.PKCS7(BLOCK_BITS).padder()
        padded = padder.update(plain_text.encode("utf-8")) + padder.finalize()
        encryptor = self._cipher(vector).encryptor()
        cipher_text = encryptor.update(padded) + encryptor.finalize()

        logger.debug(f"Encrypted {len(padded)} bytes (salt {'reused' if salt else 'generated'})")
        return hex_encode(cipher_text), hex_encode(vector)

    def decrypt(self, cipher_text: str, salt: str) -> str:
        """
        Decrypt hex *cipher_text* with the IV in *salt*.

        A wrong salt only garbles the first 16 bytes of the result. A wrong key
        or damaged cipher text fails the padding check and raises
        CryptographicError.
        """
        if cipher_text is None:
            raise NullArgumentError("cipher_text is required")
        if salt is None:
            raise NullArgumentError("salt is required")
        vector = _parse_vector(salt)
        encrypted = hex_decode(cipher_text)

        try:
            decryptor = self._cipher(vector).decryptor()
            padded = decryptor.update(encrypted) + decryptor.finalize()
            unpadder = padding.PKCS7(BLOCK_BITS).unpadder()
            decrypted = unpadder.update(padded) + unpadder.finalize()
        except ValueError as e:
            raise CryptographicError(f"Decryption failed: {e}") from e

        logger.debug(f"Decrypted {len(encrypted)} bytes")
        return decrypted.decode("utf-8", errors="replace")

    # ─────────────────────────────────────────
    # HASHING & ENTROPY
    # ─────────────────────────────────────────
    @staticmethod
    def get_hash(text: str) -> str:
        """Return the uppercase hex SHA-256 digest of *text* (UTF-8)."""
        if text is None:
            raise NullArgumentError("text is required")
        digest = hashlib.sha256(text.encode("utf-8")).hexdigest().upper()
        logger.debug(f"SHA-256: {digest[:16]}…")
        return digest

    @staticmethod
    def get_shannon_entropy(text: str) -> float:
        """
        Shannon entropy of *text* in bits per character, per
        https://en.wikipedia.org/wiki/Entropy_(information_theory)
        """
        if text is None:
            raise NullArgumentError("text is required")
        if not text:
            return 0.0

        length = len(text)
        result = 0.0
        for count in Counter(text).values():
            frequency = count / length
            result -= frequency * log2(frequency)
        return result
