"""Transport-agnostic message handlers for credential operations.

A transport (message broker, RPC server, HTTP adapter) hands each inbound
message to ``AuthMessageHandler.handle`` with its pattern and decoded
payload, and sends back the returned dict. Successful replies have the shape
``{"user": {...}, "token": ...}``; failures ``{"status", "error", "message"}``.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from authcore.core.logging import LoggingContext, get_logger
from authcore.domain.entities.auth_result import AuthFailure, AuthResult
from authcore.domain.exceptions import ValidationError
from authcore.domain.services.credential_service import CredentialService
from authcore.infrastructure.api.schemas.auth_schemas import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    VerifyTokenRequest,
)

logger = get_logger(__name__)

REGISTER_USER = "auth.register.user"
LOGIN_USER = "auth.login.user"
VERIFY_USER = "auth.verify.user"


def parse_request(model: type[BaseModel], payload: Any) -> Any:
    """Validate a payload against a request schema.

    Only the names of offending fields are reported, never submitted values.

    Raises:
        ValidationError: If the payload does not match the schema.
    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) or "body" for error in e.errors()}
        )
        raise ValidationError(f"Invalid fields: {', '.join(fields)}") from e


def render(result: AuthResult) -> dict[str, Any]:
    """Render an operation outcome as a reply payload."""
    if result.ok:
        return AuthResponse(
            user=UserResponse.model_validate(result.user),
            token=result.token,
        ).model_dump()
    return ErrorResponse(
        status=result.status.http_status,
        error=result.kind.value,
        message=result.message,
    ).model_dump()


class AuthMessageHandler:
    """Dispatch credential messages to a ``CredentialService``."""

    def __init__(self, service: CredentialService) -> None:
        self.service = service
        self._routes: dict[str, Callable[[Any], Awaitable[dict[str, Any]]]] = {
            REGISTER_USER: self.register_user,
            LOGIN_USER: self.login_user,
            VERIFY_USER: self.verify_user,
        }

    @property
    def patterns(self) -> list[str]:
        """Message patterns this handler answers."""
        return list(self._routes)

    async def handle(self, pattern: str, payload: Any) -> dict[str, Any]:
        """Handle one inbound message.

        Args:
            pattern: Message pattern, e.g. ``auth.login.user``.
            payload: Decoded message body. An optional ``correlation_id`` key
                is bound into the logging context.

        Returns:
            Reply payload.
        """
        context = {"pattern": pattern}
        if isinstance(payload, Mapping) and isinstance(payload.get("correlation_id"), str):
            context["correlation_id"] = payload["correlation_id"]

        with LoggingContext(**context):
            route = self._routes.get(pattern)
            if route is None:
                logger.warning("Unknown message pattern")
                return render(AuthFailure.from_error(ValidationError("Unknown message pattern")))
            reply = await route(payload)
            logger.info("Message handled", outcome=reply.get("error", "ok"))
            return reply

    async def register_user(self, payload: Any) -> dict[str, Any]:
        try:
            request = parse_request(RegisterRequest, payload)
        except ValidationError as e:
            return render(AuthFailure.from_error(e))
        return render(
            await self.service.register(request.email, request.name, request.password)
        )

    async def login_user(self, payload: Any) -> dict[str, Any]:
        try:
            request = parse_request(LoginRequest, payload)
        except ValidationError as e:
            return render(AuthFailure.from_error(e))
        return render(await self.service.login(request.email, request.password))

    async def verify_user(self, payload: Any) -> dict[str, Any]:
        try:
            request = parse_request(VerifyTokenRequest, payload)
        except ValidationError as e:
            return render(AuthFailure.from_error(e))
        return render(await self.service.verify_and_refresh(request.token))
