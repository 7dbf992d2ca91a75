"""
utils.py - Common Utility Functions
"""

import time
import json

TEXT_FIELDS   = ("plain_text", "cipher_text", "text")
KEY_FIELDS    = ("encryption_key", "key")
VECTOR_FIELDS = ("salt",)
VECTOR_PREFIX = 4       # hex digits of a salt kept in logs


def current_timestamp() -> int:
    return int(time.time())


def pretty_json(obj) -> str:
    return json.dumps(obj, indent=2, sort_keys=True, default=str)


def mask_sensitive(data: dict) -> dict:
    """
    Return a copy of a request body that is safe to log.

    Key material is dropped entirely, plain/cipher text is reduced to its
    length, and salts keep only a short prefix.
    """
    masked = {}
    for k, v in data.items():
        if k in KEY_FIELDS:
            masked[k] = "<redacted>"
        elif k in TEXT_FIELDS and isinstance(v, str):
            masked[k] = f"<{k}: {len(v)} chars>"
        elif k in VECTOR_FIELDS and isinstance(v, str):
            masked[k] = f"{v[:VECTOR_PREFIX]}…" if len(v) > VECTOR_PREFIX else v
        elif isinstance(v, dict):
            masked[k] = mask_sensitive(v)
        else:
            masked[k] = v
    return masked
