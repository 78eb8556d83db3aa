"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from authcore.core.config import Settings
from authcore.domain.services.credential_service import CredentialService
from authcore.infrastructure.auth.password_hasher import PasswordHasher
from authcore.infrastructure.auth.token_codec import TokenCodec
from authcore.infrastructure.persistence.database import Base
from authcore.infrastructure.persistence.models import UserModel  # noqa: F401
from authcore.infrastructure.persistence.repositories import InMemoryUserRepository

SECRET = "test-secret-key-at-least-256-bits-long-for-security"


@pytest.fixture
def settings() -> Settings:
    """Settings with a cheap hashing cost for fast tests."""
    return Settings(
        secret_key=SECRET,
        environment="testing",
        password_hash_cost=1,
        password_hash_memory_cost=1024,
        _env_file=None,
    )


@pytest.fixture
def hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher.from_settings(settings)


@pytest.fixture
def codec(settings: Settings) -> TokenCodec:
    return TokenCodec.from_settings(settings)


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def service(
    repository: InMemoryUserRepository, hasher: PasswordHasher, codec: TokenCodec
) -> CredentialService:
    return CredentialService(repository=repository, hasher=hasher, codec=codec)


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Session factory bound to an in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
