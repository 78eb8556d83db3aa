"""User entities for authentication.

A user is uniquely identified by email. The password hash lives only on
``User``; everything that leaves the service is a ``PublicUser``.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class PublicUser:
    """Identity fields that may be shared outward and embedded in tokens.

    Attributes:
        id: Unique identifier generated by the repository.
        email: User's email address, case-sensitive as stored.
        name: Display name.
    """

    id: str
    email: str
    name: str

    def to_claims(self) -> dict[str, str]:
        """Return the fields as a claim set for token issuance."""
        return asdict(self)

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "PublicUser":
        """Build from decoded token claims, ignoring any other keys.

        Raises:
            ValueError: If a field is missing or not a non-empty string.
        """
        values = {}
        for key in ("id", "email", "name"):
            value = claims.get(key)
            if not isinstance(value, str) or not value:
                raise ValueError(f"Claim '{key}' is missing or invalid")
            values[key] = value
        return cls(**values)


@dataclass(frozen=True)
class User:
    """User record as held by a repository.

    Attributes:
        id: Unique identifier (UUID string).
        email: User's email address (unique).
        name: Display name.
        password_hash: Hashed password (never store plaintext).
    """

    id: str
    email: str
    name: str
    password_hash: str

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        if not self.id:
            raise ValueError("User ID is required")
        if not self.email:
            raise ValueError("Email is required")
        if not self.password_hash:
            raise ValueError("Password hash is required")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"

    def to_public(self) -> PublicUser:
        """Strip the password hash."""
        return PublicUser(id=self.id, email=self.email, name=self.name)
