"""Domain services for authcore."""

from authcore.domain.services.credential_service import (
    CredentialService,
    create_credential_service,
)

__all__ = ["CredentialService", "create_credential_service"]
