"""
test_api.py - REST API Tests
Tests for: health, encrypt/decrypt routes, hash/entropy routes, error mapping
"""

import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from server.api import app
from server.crypto_server import build_service

ENCRYPTION_KEY       = "00112233445566778899AABBCCDDEEFF00112233445566778899AABBCCDDEEFF"
WRONG_ENCRYPTION_KEY = "00112233445566778899AABBCCDDEEFF00112233445566778899AABBCCDDEEFE"
FIXED_SALT           = "0f1e2d3c4b5a69788796a5b4c3d2e1f0"
PLAIN_TEXT           = "The quick brown fox jumps over the lazy dog, again and again."


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        app.config["TESTING"] = True
        self._saved = dict(app.config)
        app.config["ENCRYPTION_KEY"] = ENCRYPTION_KEY
        self.client = app.test_client()

    def tearDown(self):
        app.config.clear()
        app.config.update(self._saved)

    def post(self, path, body):
        return self.client.post(path, json=body)


# ─────────────────────────────────────────────
class TestHealth(ApiTestCase):

    def test_health(self):
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()["status"], "ok")
        self.assertTrue(resp.get_json()["key_configured"])

    def test_unknown_route(self):
        resp = self.client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertIn("error", resp.get_json())


# ─────────────────────────────────────────────
class TestEncryptDecrypt(ApiTestCase):

    def test_roundtrip(self):
        enc = self.post("/api/encrypt", {"plain_text": PLAIN_TEXT})
        self.assertEqual(enc.status_code, 200)
        payload = enc.get_json()
        self.assertEqual(len(payload["salt"]), 32)

        dec = self.post("/api/decrypt", payload)
        self.assertEqual(dec.status_code, 200)
        self.assertEqual(dec.get_json()["plain_text"], PLAIN_TEXT)

    def test_fixed_salt_is_deterministic(self):
        first = self.post("/api/encrypt", {"plain_text": PLAIN_TEXT, "salt": FIXED_SALT}).get_json()
        second = self.post("/api/encrypt", {"plain_text": PLAIN_TEXT, "salt": FIXED_SALT}).get_json()
        self.assertEqual(first, second)
        self.assertEqual(first["salt"], FIXED_SALT)

    def test_missing_plain_text_is_400(self):
        resp = self.post("/api/encrypt", {})
        self.assertEqual(resp.status_code, 400)

    def test_short_salt_is_400(self):
        resp = self.post("/api/encrypt", {"plain_text": PLAIN_TEXT, "salt": "0011"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Salt", resp.get_json()["error"])

    def test_non_string_field_is_400(self):
        resp = self.post("/api/encrypt", {"plain_text": 42})
        self.assertEqual(resp.status_code, 400)

    def test_non_object_body_is_400(self):
        resp = self.post("/api/encrypt", ["plain_text"])
        self.assertEqual(resp.status_code, 400)

    def test_missing_salt_on_decrypt_is_400(self):
        resp = self.post("/api/decrypt", {"cipher_text": "00" * 16})
        self.assertEqual(resp.status_code, 400)

    def test_non_hex_cipher_text_is_400(self):
        resp = self.post("/api/decrypt", {"cipher_text": "zz" * 16, "salt": FIXED_SALT})
        self.assertEqual(resp.status_code, 400)

    def test_wrong_key_is_422(self):
        payload = self.post("/api/encrypt", {"plain_text": PLAIN_TEXT, "salt": FIXED_SALT}).get_json()
        app.config["ENCRYPTION_KEY"] = WRONG_ENCRYPTION_KEY
        resp = self.post("/api/decrypt", payload)
        self.assertEqual(resp.status_code, 422)

    def test_truncated_cipher_text_is_422(self):
        resp = self.post("/api/decrypt", {"cipher_text": "00" * 15, "salt": FIXED_SALT})
        self.assertEqual(resp.status_code, 422)

    def test_oversized_field_is_413(self):
        app.config["MAX_TEXT_LENGTH"] = 8
        resp = self.post("/api/encrypt", {"plain_text": "x" * 9})
        self.assertEqual(resp.status_code, 413)

    def test_no_key_is_503(self):
        app.config["ENCRYPTION_KEY"] = None
        resp = self.post("/api/encrypt", {"plain_text": PLAIN_TEXT})
        self.assertEqual(resp.status_code, 503)
        self.assertFalse(self.client.get("/api/health").get_json()["key_configured"])

    def test_service_built_once_per_key(self):
        self.assertIs(build_service(ENCRYPTION_KEY), build_service(ENCRYPTION_KEY))
        self.assertIsNot(build_service(ENCRYPTION_KEY), build_service(WRONG_ENCRYPTION_KEY))
        self.assertIsNone(build_service(None))

    def test_malformed_configured_key_is_503(self):
        app.config["ENCRYPTION_KEY"] = "not-a-key"
        resp = self.post("/api/decrypt", {"cipher_text": "00" * 16, "salt": FIXED_SALT})
        self.assertEqual(resp.status_code, 503)


# ─────────────────────────────────────────────
class TestHashEntropy(ApiTestCase):

    def test_hash(self):
        resp = self.post("/api/hash", {"text": ""})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.get_json()["hash"],
            "E3B0C44298FC1C149AFBF4C8996FB92427AE41E4649B934CA495991B7852B855",
        )

    def test_hash_works_without_key(self):
        app.config["ENCRYPTION_KEY"] = None
        resp = self.post("/api/hash", {"text": "abc"})
        self.assertEqual(resp.status_code, 200)

    def test_hash_missing_text_is_400(self):
        self.assertEqual(self.post("/api/hash", {}).status_code, 400)

    def test_entropy(self):
        resp = self.post("/api/entropy", {"text": "abcd"})
        self.assertEqual(resp.status_code, 200)
        self.assertAlmostEqual(resp.get_json()["entropy"], 2.0)

    def test_entropy_empty(self):
        resp = self.post("/api/entropy", {"text": ""})
        self.assertEqual(resp.get_json()["entropy"], 0)


# ─────────────────────────────────────────────
if __name__ == "__main__":
    unittest.main(verbosity=2)
