"""
config.py - Server Configuration
"""

import os

# ─────────────────────────────────────────────
# ENCRYPTION KEY
# ─────────────────────────────────────────────
# 64 hex characters. No default: crypto routes answer 503 until it is set.
ENCRYPTION_KEY = os.environ.get("ENCRYPTION_KEY")

# ─────────────────────────────────────────────
# SERVER
# ─────────────────────────────────────────────
SERVER_HOST = os.environ.get("PANOCRYPT_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("PANOCRYPT_PORT", "5000"))
DEBUG       = os.environ.get("PANOCRYPT_DEBUG", "").lower() in ("1", "true", "yes", "on")

# ─────────────────────────────────────────────
# REQUEST LIMITS
# ─────────────────────────────────────────────
MAX_TEXT_LENGTH = int(os.environ.get("PANOCRYPT_MAX_TEXT", str(1024 * 1024)))   # characters per field
