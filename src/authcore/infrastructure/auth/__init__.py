"""Authentication infrastructure components.

This module provides password hashing and token signing/verification.
"""

from authcore.infrastructure.auth.password_hasher import PasswordHasher
from authcore.infrastructure.auth.token_codec import REGISTERED_CLAIMS, TokenCodec

__all__ = [
    "PasswordHasher",
    "REGISTERED_CLAIMS",
    "TokenCodec",
]
