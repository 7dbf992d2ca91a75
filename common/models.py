"""
models.py - Shared Data Models
Common: Shared utilities and models
"""

from dataclasses import dataclass, asdict


@dataclass
class EncryptedPayload:
    """Result of one encryption: both fields are hex strings."""
    cipher_text: str
    salt: str

    def to_dict(self):
        return asdict(self)
