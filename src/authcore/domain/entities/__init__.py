"""Domain entities for authcore.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from authcore.domain.entities.auth_result import AuthFailure, AuthResult, AuthSuccess
from authcore.domain.entities.user import PublicUser, User

__all__ = [
    "AuthFailure",
    "AuthResult",
    "AuthSuccess",
    "PublicUser",
    "User",
]
