"""Repository abstractions consumed by domain services."""

from authcore.domain.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
