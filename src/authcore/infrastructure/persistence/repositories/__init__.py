"""User repository implementations."""

from authcore.infrastructure.persistence.repositories.memory_user_repository import (
    InMemoryUserRepository,
)
from authcore.infrastructure.persistence.repositories.user_repository import (
    SQLAlchemyUserRepository,
)

__all__ = ["InMemoryUserRepository", "SQLAlchemyUserRepository"]
