"""
Password hashing with bcrypt.

bcrypt only looks at the first 72 bytes of its input. Rather than let a
long password be silently truncated, hash() rejects it.
"""

import bcrypt

from .exceptions import PasswordTooLongError

DEFAULT_BCRYPT_ROUNDS = 10
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing with a fixed work factor."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password with a fresh random salt.

        Raises:
            PasswordTooLongError: If the UTF-8 encoding exceeds 72 bytes
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        A malformed hash and a wrong password both return False.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            return False
