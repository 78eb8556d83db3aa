"""Abstraction for the persistent user store."""

from abc import ABC, abstractmethod

from authcore.domain.entities.user import User


class UserRepository(ABC):
    """Abstract base class for user stores.

    Implementations own id generation and email uniqueness. ``create`` must
    be atomic with respect to the uniqueness check so that two concurrent
    registrations of the same email cannot both succeed.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Get a user by exact email, or None."""
        ...

    @abstractmethod
    async def create(self, email: str, name: str, password_hash: str) -> User:
        """Persist a new user.

        Raises:
            ConflictError: If the email is already registered.
            RepositoryError: For any other storage failure.
        """
        ...
