"""Credential service.

Handles user registration, login, and token verification with sliding
refresh. Every operation returns an ``AuthResult``; no exception raised by a
collaborator crosses the operation boundary.
"""

from collections.abc import Awaitable, Callable

from authcore.core.config import Settings
from authcore.core.logging import get_logger
from authcore.domain.entities.auth_result import AuthFailure, AuthResult, AuthSuccess
from authcore.domain.entities.user import PublicUser, User
from authcore.domain.exceptions import (
    ConflictError,
    CredentialError,
    InternalError,
    InvalidCredentialsError,
    InvalidTokenError,
    RepositoryError,
    UserExistsError,
    ValidationError,
)
from authcore.domain.repositories.user_repository import UserRepository
from authcore.infrastructure.auth.password_hasher import PasswordHasher
from authcore.infrastructure.auth.token_codec import TokenCodec

logger = get_logger(__name__)


class CredentialService:
    """Registers users, authenticates logins and refreshes tokens.

    The service holds no per-request state. Token verification trusts the
    signature alone and does not consult the repository, so a token for a
    user removed after issuance stays valid until it expires.
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        codec: TokenCodec,
    ) -> None:
        """Initialize the credential service.

        Args:
            repository: User store.
            hasher: Password hasher.
            codec: Token codec owning the signing secret.
        """
        self.repository = repository
        self.hasher = hasher
        self.codec = codec

    async def register(self, email: str, name: str, password: str) -> AuthResult:
        """Register a new user and issue a token.

        Args:
            email: Email address, unique across users.
            name: Display name.
            password: Plaintext password.

        Returns:
            ``AuthSuccess`` with the public user and token, or ``AuthFailure``
            of kind ``user_exists``, ``validation_error``, ``repository_error``,
            ``encoding_error`` or ``internal_error``.
        """

        async def operation() -> AuthSuccess:
            if await self._find_by_email(email) is not None:
                raise UserExistsError()

            try:
                password_hash = self.hasher.hash(password)
            except UnicodeEncodeError as e:
                # Lone surrogates cannot be encoded for hashing
                raise ValidationError("Invalid fields: password") from e

            try:
                user = await self._create(email, name, password_hash)
            except ConflictError as e:
                # Lost a race with a concurrent registration
                raise UserExistsError() from e

            logger.info("User registered", user_id=user.id)
            return self._issue(user.to_public())

        return await self._run("register", operation)

    async def login(self, email: str, password: str) -> AuthResult:
        """Authenticate a user by email and password and issue a token.

        An unknown email and a wrong password produce the same failure.

        Args:
            email: Email address.
            password: Plaintext password.

        Returns:
            ``AuthSuccess`` or ``AuthFailure`` of kind ``invalid_credentials``
            (or a storage/internal kind).
        """

        async def operation() -> AuthSuccess:
            user = await self._find_by_email(email)

            if user is None:
                self.hasher.verify_dummy(password)
                logger.info("Login rejected", reason="unknown_email")
                raise InvalidCredentialsError()

            if not self.hasher.verify(password, user.password_hash):
                logger.info("Login rejected", reason="password_mismatch", user_id=user.id)
                raise InvalidCredentialsError()

            logger.info("User logged in", user_id=user.id)
            return self._issue(user.to_public())

        return await self._run("login", operation)

    async def verify_and_refresh(self, token: str) -> AuthResult:
        """Verify a token and reissue it with a fresh expiry window.

        Args:
            token: A previously issued token.

        Returns:
            ``AuthSuccess`` with the unchanged public user and a new token, or
            ``AuthFailure`` of kind ``invalid_token``.
        """

        async def operation() -> AuthSuccess:
            claims = self.codec.verify(token)
            try:
                user = PublicUser.from_claims(claims)
            except ValueError as e:
                logger.debug("Token rejected", reason="missing_user_claims")
                raise InvalidTokenError() from e
            return self._issue(user)

        return await self._run("verify_and_refresh", operation)

    async def _find_by_email(self, email: str) -> User | None:
        try:
            return await self.repository.find_by_email(email)
        except CredentialError:
            raise
        except Exception as e:
            raise RepositoryError() from e

    async def _create(self, email: str, name: str, password_hash: str) -> User:
        try:
            return await self.repository.create(email, name, password_hash)
        except CredentialError:
            raise
        except Exception as e:
            raise RepositoryError() from e

    def _issue(self, user: PublicUser) -> AuthSuccess:
        return AuthSuccess(user=user, token=self.codec.issue(user.to_claims()))

    async def _run(
        self, operation_name: str, operation: Callable[[], Awaitable[AuthSuccess]]
    ) -> AuthResult:
        """Run an operation and normalize any failure into an ``AuthFailure``."""
        try:
            return await operation()
        except CredentialError as e:
            if e.__cause__ is not None:
                logger.warning(
                    "Credential operation failed",
                    operation=operation_name,
                    kind=e.kind.value,
                    cause=type(e.__cause__).__name__,
                )
            return AuthFailure.from_error(e)
        except Exception:
            logger.exception("Unexpected error in credential operation", operation=operation_name)
            return AuthFailure.from_error(InternalError())


def create_credential_service(
    settings: Settings, repository: UserRepository
) -> CredentialService:
    """Build a ``CredentialService`` from settings.

    Args:
        settings: Application settings, constructed once at process start.
        repository: User store to use.

    Returns:
        A ready ``CredentialService``.
    """
    return CredentialService(
        repository=repository,
        hasher=PasswordHasher.from_settings(settings),
        codec=TokenCodec.from_settings(settings),
    )
