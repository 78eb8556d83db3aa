"""In-memory user repository for tests and local development."""

import asyncio
import uuid

from authcore.domain.entities.user import User
from authcore.domain.exceptions import ConflictError
from authcore.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """Process-local user store keyed by email."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._users)

    async def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    async def create(self, email: str, name: str, password_hash: str) -> User:
        async with self._lock:
            if email in self._users:
                raise ConflictError()
            user = User(
                id=str(uuid.uuid4()),
                email=email,
                name=name,
                password_hash=password_hash,
            )
            self._users[email] = user
        return user
