"""Pydantic schemas for credential requests and responses."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def check_email(value: str) -> str:
    """Validate email syntax and return the address exactly as submitted.

    Users are looked up by the stored address verbatim, so the normalized
    form produced by email-validator is discarded.
    """
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as e:
        raise ValueError("value is not a valid email address") from e
    return value


EmailAddress = Annotated[str, AfterValidator(check_email)]


class RegisterRequest(BaseModel):
    """Request body for user registration."""

    email: EmailAddress = Field(..., description="User's email address")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    password: str = Field(..., min_length=1, description="User's password")


class LoginRequest(BaseModel):
    """Request body for login."""

    email: EmailAddress = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")


class VerifyTokenRequest(BaseModel):
    """Request body for token verification and refresh."""

    token: str = Field(..., min_length=1, description="Previously issued token")


class UserResponse(BaseModel):
    """Public user information."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    name: str = Field(..., description="Display name")


class AuthResponse(BaseModel):
    """Response for a successful register, login or verify."""

    user: UserResponse = Field(..., description="User information")
    token: str = Field(..., description="Signed identity token")


class ErrorResponse(BaseModel):
    """Response for a failed operation."""

    status: int = Field(..., description="HTTP-equivalent status code")
    error: str = Field(..., description="Error kind")
    message: str = Field(..., description="Human-readable error message")
