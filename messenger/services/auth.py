import hashlib
import hmac
import os

_ITERATIONS = 100_000
_SALT_BYTES = 16


def hash_password(password: str, salt: bytes | None = None) -> str:
    """Hash a password with PBKDF2-HMAC-SHA256.

    Returns ``"<salt hex>$<hash hex>"``, the form stored in ``usr.password``.
    A fresh random salt is generated unless one is given.
    """
    if salt is None:
        salt = os.urandom(_SALT_BYTES)
    key = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _ITERATIONS)
    return f"{salt.hex()}${key.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        salt_hex, _ = stored.split("$", 1)
        salt = bytes.fromhex(salt_hex)
    except ValueError:
        return False
    return hmac.compare_digest(hash_password(password, salt), stored)
