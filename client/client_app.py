"""
client_app.py - Command-line Interface
Encrypt, decrypt, hash and measure entropy from the shell.

Usage:
  python client_app.py encrypt "some text"            [--salt <32 hex>]
  python client_app.py decrypt <cipher hex> --salt <32 hex>
  python client_app.py hash    "some text"
  python client_app.py entropy "some text"

The key comes from --key or the ENCRYPTION_KEY environment variable.
"""

import sys
import os
import argparse
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from common.crypto_service import CryptoService
from common.exceptions import CryptoServiceError
from common.models import EncryptedPayload
from common.utils import pretty_json

logger = logging.getLogger(__name__)

KEY_ENV_VAR = "ENCRYPTION_KEY"


# ──────────────────────────────────────────────
# COMMANDS
# ──────────────────────────────────────────────
def cmd_encrypt(args) -> int:
    service = CryptoService(args.key)
    cipher_text, salt = service.encrypt(args.text, args.salt)
    print(pretty_json(EncryptedPayload(cipher_text, salt).to_dict()))
    return 0


def cmd_decrypt(args) -> int:
    service = CryptoService(args.key)
    print(service.decrypt(args.cipher_text, args.salt))
    return 0


def cmd_hash(args) -> int:
    print(CryptoService.get_hash(args.text))
    return 0


def cmd_entropy(args) -> int:
    print(f"{CryptoService.get_shannon_entropy(args.text):.6f}")
    return 0


# ──────────────────────────────────────────────
# CLI
# ──────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AES-256-CBC encryption, SHA-256 hashing and entropy")
    parser.add_argument("--key", default=os.environ.get(KEY_ENV_VAR),
                        help=f"64 character hex key (default: ${KEY_ENV_VAR})")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd")

    p_encrypt = sub.add_parser("encrypt", help="Encrypt text")
    p_encrypt.add_argument("text")
    p_encrypt.add_argument("--salt", help="Reuse a previous 32 character hex salt")
    p_encrypt.set_defaults(func=cmd_encrypt)

    p_decrypt = sub.add_parser("decrypt", help="Decrypt hex cipher text")
    p_decrypt.add_argument("cipher_text")
    p_decrypt.add_argument("--salt", required=True)
    p_decrypt.set_defaults(func=cmd_decrypt)

    p_hash = sub.add_parser("hash", help="SHA-256 digest of text")
    p_hash.add_argument("text")
    p_hash.set_defaults(func=cmd_hash)

    p_entropy = sub.add_parser("entropy", help="Shannon entropy of text (bits/char)")
    p_entropy.add_argument("text")
    p_entropy.set_defaults(func=cmd_entropy)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.cmd is None:
        parser.print_help()
        return 2

    try:
        return args.func(args)
    except CryptoServiceError as e:
        logger.error(f"{args.cmd} failed: {e}")
        if args.cmd in ("encrypt", "decrypt") and args.key is None:
            logger.error(f"Tip: pass --key or set {KEY_ENV_VAR}.")
        return 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
