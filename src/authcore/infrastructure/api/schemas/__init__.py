"""Pydantic schemas for authcore requests and responses."""

from authcore.infrastructure.api.schemas.auth_schemas import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    VerifyTokenRequest,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    "VerifyTokenRequest",
]
