"""One-way password hashing for stored user credentials.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16-byte salt.
The stored form is ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>`` so the
iteration count can be raised later without invalidating existing hashes.
"""

import hashlib
import hmac
import os

HASH_SCHEME = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 100_000
MIN_ITERATIONS = 1_000
MAX_ITERATIONS = 1_000_000


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """
    Hash a plaintext password.

    Args:
        password: The plaintext password.
        iterations: PBKDF2 iteration count.

    Returns:
        str: The encoded hash, safe to store.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{HASH_SCHEME}${iterations}${salt.hex()}${dk.hex()}"


def is_password_hash(value: str) -> bool:
    """Check whether a value has the `scheme$iterations$salt$hash` layout."""
    parts = value.split("$")
    return len(parts) == 4 and parts[0] == HASH_SCHEME and parts[1].isdigit()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plaintext password against an encoded hash.

    Malformed hashes never match, nor do hashes whose iteration count is
    outside MIN_ITERATIONS..MAX_ITERATIONS.

    Args:
        plain_password: The password provided by the user.
        hashed_password: The stored encoded hash.

    Returns:
        bool: True if the password matches, otherwise False.
    """
    if not hashed_password or not is_password_hash(hashed_password):
        return False
    _, iterations, salt_hex, hash_hex = hashed_password.split("$")
    if not MIN_ITERATIONS <= int(iterations) <= MAX_ITERATIONS:
        return False
    try:
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac(
        "sha256", plain_password.encode("utf-8"), salt, int(iterations)
    )
    # Constant-time comparison
    return hmac.compare_digest(dk, stored_hash)
