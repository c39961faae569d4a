"""
Password hashing helpers.

Passwords are stored as ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>`` so the
iteration count can be raised later without invalidating existing hashes.
"""

from __future__ import annotations

import hashlib
import secrets

ALGORITHM = "pbkdf2_sha256"
ITERATIONS = 100_000


def hash_password(password: str, salt: str | None = None, iterations: int = ITERATIONS) -> str:
    """Hash ``password`` with a random (or given) salt."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, stored_hash: str | None) -> bool:
    """Check ``password`` against a hash produced by :func:`hash_password`."""
    if not stored_hash:
        return False
    parts = stored_hash.split("$")
    if len(parts) != 4 or parts[0] != ALGORITHM or not parts[1].isdigit():
        return False
    _, iterations, salt, _ = parts
    computed = hash_password(password, salt=salt, iterations=int(iterations))
    return secrets.compare_digest(computed, stored_hash)
