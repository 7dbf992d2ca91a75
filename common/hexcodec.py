"""
hexcodec.py - Hex Encoding / Decoding
Common: Shared utilities and models

Encoding always emits lowercase digits; decoding accepts either case.
"""

from common.exceptions import InvalidFormatError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def hex_encode(data: bytes) -> str:
    """Return *data* as a lowercase hex string (two digits per byte)."""
    return data.hex()


def hex_decode(text: str) -> bytes:
    """
    Decode a hex string into raw bytes.

    Raises InvalidFormatError on an odd length or any character outside
    0-9a-fA-F (bytes.fromhex alone would let whitespace through).
    """
    if not all(c in HEX_DIGITS for c in text):
        raise InvalidFormatError("Expected a hexadecimal string.")
    if len(text) % 2:
        raise InvalidFormatError("Expected an even number of hex digits.")
    return bytes.fromhex(text)
