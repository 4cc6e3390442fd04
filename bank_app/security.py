"""
Password hashing.

The ledger never compares raw passwords itself; it hands them
to a PasswordHasher. Hashes are bcrypt, produced and checked
through passlib.
"""

from functools import lru_cache

from passlib.context import CryptContext

from bank_app.config import get_settings


class PasswordHasher:

    def __init__(self, rounds: int = 12):
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, raw_password: str) -> str:
        return self.context.hash(raw_password)

    def verify(self, raw_password: str, password_hash: str) -> bool:
        """
        Check a presented password against a stored hash.

        A malformed or unknown hash counts as a mismatch.
        """
        try:
            return self.context.verify(raw_password, password_hash)
        except ValueError:
            return False


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)
