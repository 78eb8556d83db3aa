"""SQLAlchemy-backed user repository."""

import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from authcore.core.logging import get_logger
from authcore.domain.entities.user import User
from authcore.domain.exceptions import ConflictError, RepositoryError
from authcore.domain.repositories.user_repository import UserRepository
from authcore.infrastructure.persistence.models import UserModel

logger = get_logger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    """Repository for user database operations.

    Each call runs in its own session and transaction. Email uniqueness is
    enforced by the unique index on ``users.email``.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the repository.

        Args:
            session_factory: Factory producing SQLAlchemy async sessions.
        """
        self.session_factory = session_factory

    async def find_by_email(self, email: str) -> User | None:
        """Get a user by email.

        Args:
            email: User's email address, matched exactly.

        Returns:
            User if found, None otherwise.

        Raises:
            RepositoryError: If the query fails.
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(UserModel).where(UserModel.email == email)
                )
                model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("User lookup failed", error_type=type(e).__name__)
            raise RepositoryError() from e
        return model.to_entity() if model is not None else None

    async def create(self, email: str, name: str, password_hash: str) -> User:
        """Create a new user.

        Args:
            email: User's email address.
            name: Display name.
            password_hash: Hashed password.

        Returns:
            The created user with its generated ID.

        Raises:
            ConflictError: If the email already exists.
            RepositoryError: For any other database failure.
        """
        model = UserModel(
            id=str(uuid.uuid4()),
            email=email,
            name=name,
            password_hash=password_hash,
        )
        user = model.to_entity()
        try:
            async with self.session_factory() as session:
                session.add(model)
                await session.commit()
        except IntegrityError as e:
            raise ConflictError() from e
        except SQLAlchemyError as e:
            logger.error("User insert failed", error_type=type(e).__name__)
            raise RepositoryError() from e
        return user
