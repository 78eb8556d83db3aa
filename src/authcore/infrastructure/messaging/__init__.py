"""Message handling for credential operations."""

from authcore.infrastructure.messaging.auth_handlers import (
    LOGIN_USER,
    REGISTER_USER,
    VERIFY_USER,
    AuthMessageHandler,
)

__all__ = ["AuthMessageHandler", "LOGIN_USER", "REGISTER_USER", "VERIFY_USER"]
