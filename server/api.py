"""
api.py - Flask REST API Server

Routes:
  GET  /api/health    - liveness + whether a key is configured
  POST /api/encrypt   - {plain_text, salt?}   -> {cipher_text, salt}
  POST /api/decrypt   - {cipher_text, salt}   -> {plain_text}
  POST /api/hash      - {text}                -> {hash}
  POST /api/entropy   - {text}                -> {entropy}
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging

from flask import Flask, request, jsonify, abort

from common.crypto_service import CryptoService
from common.exceptions import (
    CryptoServiceError,
    CryptographicError,
    InvalidFormatError,
    NullArgumentError,
)
from common.models import EncryptedPayload
from common.utils import current_timestamp, mask_sensitive
from server.config import ENCRYPTION_KEY, SERVER_HOST, SERVER_PORT, DEBUG, MAX_TEXT_LENGTH
from server.crypto_server import build_service

logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("panocrypt_api")

app = Flask(__name__)
app.config["ENCRYPTION_KEY"] = ENCRYPTION_KEY
app.config["MAX_TEXT_LENGTH"] = MAX_TEXT_LENGTH


# ─── HELPERS ──────────────────────────────────────────────────────────────────

def _service() -> CryptoService:
    try:
        service = build_service(app.config.get("ENCRYPTION_KEY"))
    except CryptoServiceError as e:
        logger.error(f"Configured encryption key is unusable: {e}")
        abort(503, description="Encryption key is misconfigured")
    if service is None:
        abort(503, description="Encryption key not configured")
    return service


def _json_body() -> dict:
    data = request.get_json(force=True)
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    logger.debug(f"{request.path} body: {mask_sensitive(data)}")
    return data


def _text_field(data: dict, name: str):
    """Return *name* from the body; None when absent, 400/413 when unusable."""
    value = data.get(name)
    if value is None:
        return None
    if not isinstance(value, str):
        abort(400, description=f"{name} must be a string")
    if len(value) > app.config["MAX_TEXT_LENGTH"]:
        abort(413, description=f"{name} exceeds {app.config['MAX_TEXT_LENGTH']} characters")
    return value


# ─── API ROUTES ───────────────────────────────────────────────────────────────

@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({
        "status": "ok",
        "timestamp": current_timestamp(),
        "key_configured": bool(app.config.get("ENCRYPTION_KEY")),
    }), 200


@app.route("/api/encrypt", methods=["POST"])
def encrypt():
    data = _json_body()
    plain_text = _text_field(data, "plain_text")
    salt = _text_field(data, "salt")
    cipher_text, salt_used = _service().encrypt(plain_text, salt)
    logger.info(f"[ENCRYPT] {len(plain_text)} chars, salt {'reused' if salt else 'generated'}")
    return jsonify(EncryptedPayload(cipher_text, salt_used).to_dict()), 200


@app.route("/api/decrypt", methods=["POST"])
def decrypt():
    data = _json_body()
    cipher_text = _text_field(data, "cipher_text")
    salt = _text_field(data, "salt")
    plain_text = _service().decrypt(cipher_text, salt)
    logger.info(f"[DECRYPT] {len(cipher_text) // 2} bytes")
    return jsonify({"plain_text": plain_text}), 200


@app.route("/api/hash", methods=["POST"])
def hash_text():
    text = _text_field(_json_body(), "text")
    digest = CryptoService.get_hash(text)
    logger.info(f"[HASH] {len(text)} chars → {digest[:12]}…")
    return jsonify({"hash": digest}), 200


@app.route("/api/entropy", methods=["POST"])
def entropy():
    text = _text_field(_json_body(), "text")
    value = CryptoService.get_shannon_entropy(text)
    logger.info(f"[ENTROPY] {len(text)} chars → {value:.4f} bits/char")
    return jsonify({"entropy": value}), 200


# ─── ERROR HANDLERS ───────────────────────────────────────────────────────────

@app.errorhandler(NullArgumentError)
@app.errorhandler(InvalidFormatError)
def invalid_argument(e):
    logger.warning(f"[REJECTED] {request.path}: {e}")
    return jsonify({"error": str(e)}), 400


@app.errorhandler(CryptographicError)
def cryptographic_failure(e):
    logger.warning(f"[CRYPTO] {request.path}: {e}")
    return jsonify({"error": str(e)}), 422


@app.errorhandler(400)
def bad_request(e):
    return jsonify({"error": e.description}), 400


@app.errorhandler(404)
def not_found(e):
    return jsonify({"error": "Endpoint not found"}), 404


@app.errorhandler(413)
def too_large(e):
    return jsonify({"error": e.description}), 413


@app.errorhandler(503)
def unavailable(e):
    return jsonify({"error": e.description}), 503


@app.errorhandler(500)
def internal(e):
    logger.exception("Internal server error")
    return jsonify({"error": "Internal server error"}), 500


# ─── STARTUP ──────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    if not app.config["ENCRYPTION_KEY"]:
        logger.warning("ENCRYPTION_KEY is not set - encrypt/decrypt will answer 503")
    logger.info(f"API health check: http://{SERVER_HOST}:{SERVER_PORT}/api/health")
    app.run(host=SERVER_HOST, port=SERVER_PORT, debug=DEBUG)
