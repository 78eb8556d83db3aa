"""SQLAlchemy models for authcore."""

from authcore.infrastructure.persistence.models.user import UserModel

__all__ = ["UserModel"]
