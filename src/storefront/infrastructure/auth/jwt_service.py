"""JWT token service.

Issues and decodes the bearer tokens handed to logged-in users. A token
carries the user record under the ``user`` claim and expires after the
configured lifetime (30 minutes by default).
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from fastapi.encoders import jsonable_encoder

from storefront.core.config import Settings, get_settings


class JWTError(Exception):
    """Base exception for JWT-related errors."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is malformed or its signature does not verify."""

    def __init__(self, message: str, reason: str = "invalid token") -> None:
        super().__init__(message)
        self.reason = reason


class JWTService:
    """Service for creating and validating user tokens."""

    ALGORITHM = "HS256"

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the JWT service.

        Args:
            settings: Application settings holding the signing secret and
                token lifetime. Defaults to the cached process settings.
        """
        self._settings = settings or get_settings()

    @property
    def secret_key(self) -> str:
        """Get the secret key for signing tokens."""
        secret = self._settings.secret_key
        if not secret:
            raise JWTError("Signing secret is not configured")
        return secret

    @property
    def expires_delta(self) -> timedelta:
        return timedelta(minutes=self._settings.token_expire_minutes)

    def generate_token(
        self,
        user: Any,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed token for a user record.

        Args:
            user: User record embedded under ``user``. Dates, UUIDs and
                pydantic models are converted to their JSON form.
            expires_delta: Custom lifetime. Defaults to the configured value.

        Returns:
            Encoded JWT.

        Raises:
            JWTError: If no signing secret is configured.
        """
        if expires_delta is None:
            expires_delta = self.expires_delta

        now = datetime.now(timezone.utc)
        payload = {
            "user": jsonable_encoder(user),
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.ALGORITHM)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a token.

        Args:
            token: The encoded JWT.

        Returns:
            Decoded token payload.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is malformed or badly signed.
        """
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidSignatureError as e:
            raise InvalidTokenError("Invalid token signature", reason="invalid signature") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

    def get_expires_in(self) -> int:
        """Get the configured token lifetime in seconds."""
        return int(self.expires_delta.total_seconds())


def generate_token(user: dict[str, Any]) -> str:
    """Issue a token for ``user`` using the process-wide settings."""
    return JWTService().generate_token(user)
