# =============================================================================
# app/auth/passwords.py - Password Hashing
# =============================================================================
# Argon2id hashing for stored passwords. Plain-text passwords never reach
# the store: handlers hash the field before calling the data services.
# =============================================================================

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class PasswordHasher:
    """Argon2id password hasher with library defaults."""

    def __init__(self) -> None:
        self._hasher = Argon2Hasher()

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, hash: str, password: str) -> bool:
        try:
            return self._hasher.verify(hash, password)
        except (VerifyMismatchError, InvalidHashError, VerificationError):
            return False
