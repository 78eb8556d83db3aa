"""Outcomes of credential operations.

Operations return ``AuthSuccess`` or ``AuthFailure`` rather than raising,
so callers branch on ``result.ok`` and ``failure.kind``.
"""

from dataclasses import dataclass
from typing import Literal, Union

from authcore.domain.entities.user import PublicUser
from authcore.domain.exceptions import CredentialError, ErrorKind, ErrorStatus


@dataclass(frozen=True)
class AuthSuccess:
    """Successful operation: the public user and a freshly issued token."""

    user: PublicUser
    token: str
    ok: Literal[True] = True


@dataclass(frozen=True)
class AuthFailure:
    """Failed operation.

    Attributes:
        kind: Machine-readable error kind.
        status: Coarse status class.
        message: Human-readable message safe to return to any caller.
    """

    kind: ErrorKind
    status: ErrorStatus
    message: str
    ok: Literal[False] = False

    @classmethod
    def from_error(cls, error: CredentialError) -> "AuthFailure":
        return cls(kind=error.kind, status=error.status, message=error.message)


AuthResult = Union[AuthSuccess, AuthFailure]
