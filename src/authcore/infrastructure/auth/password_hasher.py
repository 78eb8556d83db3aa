"""Password hashing utility using Argon2.

Provides salted password hashing and constant-time verification using the
Argon2id algorithm, the winner of the Password Hashing Competition and
recommended by OWASP.
"""

import secrets

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError

from authcore.core.config import Settings


class PasswordHasher:
    """Hash and verify passwords with a configurable work factor.

    Args:
        time_cost: Argon2 iterations. This is the cost factor exposed
            through configuration.
        memory_cost: Argon2 memory usage in KiB.
    """

    def __init__(self, time_cost: int = 10, memory_cost: int = 65536) -> None:
        self._hasher = Argon2Hasher(time_cost=time_cost, memory_cost=memory_cost)
        # Verified against when the user does not exist so both login
        # failure paths pay the same hashing cost.
        self._dummy_hash = self._hasher.hash(secrets.token_urlsafe(32))

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(
            time_cost=settings.password_hash_cost,
            memory_cost=settings.password_hash_memory_cost,
        )

    def hash(self, password: str) -> str:
        """Hash a password using Argon2id.

        Args:
            password: The plaintext password to hash.

        Returns:
            The encoded hash string, different on every call.

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("secret1").startswith("$argon2id$")
            True
        """
        return self._hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Uses constant-time comparison. Never raises: a malformed, empty or
        non-string hash simply fails verification.

        Args:
            password: The plaintext password to verify.
            hashed: The stored hash to verify against.

        Returns:
            True if the password matches, False otherwise.
        """
        if not isinstance(hashed, str) or not hashed:
            return False
        try:
            return self._hasher.verify(hashed, password)
        except (VerificationError, InvalidHashError, UnicodeEncodeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend one verification on a throwaway hash. Always False."""
        self.verify(password, self._dummy_hash)
        return False
