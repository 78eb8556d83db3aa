"""Error taxonomy for credential operations.

Every failure that leaves a credential operation is one of these kinds.
Each error carries a machine-readable ``kind`` and a coarse ``status`` class
so callers can branch without string matching. Messages are fixed and never
include internal causes.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminator for credential operation failures."""

    VALIDATION = "validation_error"
    USER_EXISTS = "user_exists"
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    CONFLICT = "conflict"
    REPOSITORY = "repository_error"
    ENCODING = "encoding_error"
    INTERNAL = "internal_error"


class ErrorStatus(str, Enum):
    """Coarse status class surfaced to callers."""

    CLIENT_ERROR = "client-error"
    AUTH_ERROR = "auth-error"
    INTERNAL_ERROR = "internal-error"

    @property
    def http_status(self) -> int:
        """HTTP-equivalent status code for this class."""
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorStatus.CLIENT_ERROR: 400,
    ErrorStatus.AUTH_ERROR: 401,
    ErrorStatus.INTERNAL_ERROR: 500,
}


class CredentialError(Exception):
    """Base class for all credential-related errors."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status: ErrorStatus = ErrorStatus.INTERNAL_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CredentialError):
    """Raised when an inbound request is malformed."""

    kind = ErrorKind.VALIDATION
    status = ErrorStatus.CLIENT_ERROR
    default_message = "Invalid request"


class UserExistsError(CredentialError):
    """Raised when registering an email that is already taken."""

    kind = ErrorKind.USER_EXISTS
    status = ErrorStatus.CLIENT_ERROR
    default_message = "User already exists"


class InvalidCredentialsError(CredentialError):
    """Raised for an unknown email or a wrong password, indistinguishably."""

    kind = ErrorKind.INVALID_CREDENTIALS
    status = ErrorStatus.CLIENT_ERROR
    default_message = "User/Password not valid"


class InvalidTokenError(CredentialError):
    """Raised for any token that fails verification, whatever the cause."""

    kind = ErrorKind.INVALID_TOKEN
    status = ErrorStatus.AUTH_ERROR
    default_message = "Invalid token"


class ConflictError(CredentialError):
    """Raised by a repository when a uniqueness constraint is violated."""

    kind = ErrorKind.CONFLICT
    status = ErrorStatus.CLIENT_ERROR
    default_message = "Resource already exists"


class RepositoryError(CredentialError):
    """Raised by a repository for any other storage failure."""

    kind = ErrorKind.REPOSITORY
    status = ErrorStatus.CLIENT_ERROR
    default_message = "Unable to process request"


class EncodingError(CredentialError):
    """Raised when a claim set cannot be serialized into a token."""

    kind = ErrorKind.ENCODING
    status = ErrorStatus.INTERNAL_ERROR
    default_message = "Unable to issue token"


class InternalError(CredentialError):
    """Normalized form of an unexpected exception."""
