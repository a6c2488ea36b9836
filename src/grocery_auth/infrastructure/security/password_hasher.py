"""Bcrypt password hasher adapter."""

from __future__ import annotations

import base64
import hashlib
import hmac

import bcrypt

from grocery_auth.application.ports.password_hasher_port import PasswordHasherPort

DEFAULT_ROUNDS = 12
MIN_ROUNDS = 4
MAX_ROUNDS = 31

_PREHASH_KEY = b"grocery-auth"


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt.

    Digests use the modular crypt format ``$2b$<cost>$<salt><hash>``, so the
    128-bit salt and the cost factor travel with every stored value and the
    cost can be raised without touching existing digests. Passwords are
    pre-hashed with HMAC-SHA256 so every byte counts despite bcrypt's 72-byte
    input limit.
    """

    def __init__(self, *, rounds: int = DEFAULT_ROUNDS) -> None:
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}")
        self._rounds = rounds

    def hash_password(self, password: str) -> str:
        encoded = _prehash_password(password)
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_prehash_password(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False


def _prehash_password(password: str) -> bytes:
    # 44 base64 bytes, no NUL bytes, well under bcrypt's 72-byte limit.
    encoded = password.encode("utf-8", "surrogatepass")
    return base64.b64encode(hmac.digest(_PREHASH_KEY, encoded, hashlib.sha256))
