"""
Adapter: PBKDF2 password hashing.

Implements the PasswordHasher port with PBKDF2-HMAC-SHA256 and a random
16-byte salt per password. Encoded hashes have the form
``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>`` so the iteration
count can be raised without invalidating stored hashes.
"""

import hashlib
import hmac
import os

from devcamper.domain.ports import PasswordHasher

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 260_000
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):
    """Concrete PBKDF2-HMAC-SHA256 hasher."""

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = os.urandom(SALT_BYTES)
        digest = _derive(password, salt, self._iterations)
        return f"{ALGORITHM}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, hashed: str) -> bool:
        try:
            algorithm, iterations, salt_hex, digest_hex = hashed.split("$")
            if algorithm != ALGORITHM:
                return False
            expected = bytes.fromhex(digest_hex)
            digest = _derive(password, bytes.fromhex(salt_hex), int(iterations))
        except ValueError:
            return False
        return hmac.compare_digest(digest, expected)


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
