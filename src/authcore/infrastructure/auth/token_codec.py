"""Token codec for issuing and verifying identity tokens.

Tokens are HMAC-signed JWTs carrying the public user claims plus issuer,
issued-at and expiry timestamps. Verification failures of every kind
collapse into a single ``InvalidTokenError`` so callers cannot learn why a
token was rejected.
"""

from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from authcore.core.config import Settings
from authcore.core.logging import get_logger
from authcore.domain.exceptions import EncodingError, InvalidTokenError

logger = get_logger(__name__)

# Claims the codec owns; caller-supplied values for these are replaced.
REGISTERED_CLAIMS = frozenset({"iss", "iat", "exp", "nbf"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCodec:
    """Sign claim sets into bearer tokens and verify presented tokens.

    The codec is the only component holding the signing secret.
    """

    def __init__(
        self,
        secret_key: str,
        ttl: timedelta,
        algorithm: str = "HS256",
        issuer: str = "authcore",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the codec.

        Args:
            secret_key: HMAC signing secret.
            ttl: Default token lifetime.
            algorithm: HMAC algorithm name understood by PyJWT.
            issuer: Value of the ``iss`` claim, required on verification.
            clock: Returns the current aware datetime. Used for ``iat`` and
                ``exp`` on issue and as "now" for the expiry check on verify.
        """
        self._secret_key = secret_key
        self.ttl = ttl
        self.algorithm = algorithm
        self.issuer = issuer
        self._clock = clock

    @classmethod
    def from_settings(
        cls, settings: Settings, clock: Callable[[], datetime] = _utcnow
    ) -> "TokenCodec":
        return cls(
            secret_key=settings.secret_key.get_secret_value(),
            ttl=timedelta(minutes=settings.token_expire_minutes),
            algorithm=settings.token_algorithm,
            issuer=settings.token_issuer,
            clock=clock,
        )

    def issue(self, claims: Mapping[str, Any], ttl: timedelta | None = None) -> str:
        """Sign claims into a token valid for ``ttl`` (default: configured TTL).

        Args:
            claims: Public claims to embed.
            ttl: Optional lifetime override.

        Returns:
            Encoded token string.

        Raises:
            EncodingError: If the claims cannot be serialized.
        """
        now = self._clock()
        payload = {k: v for k, v in claims.items() if k not in REGISTERED_CLAIMS}
        # Fractional NumericDates: a reissue within the same second gets a later exp
        payload.update(
            iss=self.issuer,
            iat=now.timestamp(),
            exp=(now + (ttl if ttl is not None else self.ttl)).timestamp(),
        )
        try:
            return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)
        except (TypeError, ValueError) as e:
            logger.error("Token encoding failed", error_type=type(e).__name__)
            raise EncodingError() from e

    def verify(self, token: str) -> dict[str, Any]:
        """Decode and validate a token.

        Args:
            token: The encoded token.

        Returns:
            The full decoded payload, including ``iss``, ``iat`` and ``exp``.

        Raises:
            InvalidTokenError: If the token is malformed, tampered with,
                signed with another key, from another issuer, or expired.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={
                    "require": ["exp", "iat", "iss"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
            self._check_lifetime(payload)
        except jwt.PyJWTError as e:
            logger.debug("Token rejected", reason=type(e).__name__)
            raise InvalidTokenError() from e
        return payload

    def _check_lifetime(self, payload: Mapping[str, Any]) -> None:
        """Check ``iat`` and ``exp`` against the codec clock.

        Raises:
            jwt.DecodeError: If either claim is not a number.
            jwt.ImmatureSignatureError: If the token was issued in the future.
            jwt.ExpiredSignatureError: If the token has expired.
        """
        issued_at, expires_at = payload["iat"], payload["exp"]
        for value in (issued_at, expires_at):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise jwt.DecodeError("Timing claims must be numbers")

        now = self._clock().timestamp()
        if issued_at > now:
            raise jwt.ImmatureSignatureError("The token is not yet valid (iat)")
        if expires_at <= now:
            raise jwt.ExpiredSignatureError("Signature has expired")
