"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Token kinds (``type`` claim):
    access   15m default, carries email, role, organization_id
    refresh  7d default, stored in the sessions table and rotated on use
    action   purpose-bound token mailed to users (LGPD deletion confirmation)

Lifetimes are configured as ``"{n}{s|m|h|d}"`` strings; anything else falls
back to 900 seconds.
"""

import re
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success

DEFAULT_EXPIRATION_SECONDS = 900
MIN_SECRET_LENGTH = 32

_DURATION_PATTERN = re.compile(r"^(\d+)([smhd])$")
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"
ACTION_TOKEN_TYPE = "action"


def parse_expiration(value: str) -> int:
    """Convert a duration string into seconds.

    Args:
        value: Duration such as ``"15m"``, ``"7d"``, ``"3600s"``, ``"12h"``.

    Returns:
        int: Seconds, or 900 when the format is not recognized.

    Example:
        >>> parse_expiration("7d")
        604800
        >>> parse_expiration("soon")
        900
    """
    match = _DURATION_PATTERN.match(value.strip()) if value else None
    if match is None:
        return DEFAULT_EXPIRATION_SECONDS
    amount, unit = match.groups()
    return int(amount) * _UNIT_SECONDS[unit]


class JWTService:
    """JWT token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            user_id=user.id, email=user.email, role=user.role.value
        )
        result = token_service.validate_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        access_expires_in: str = "15m",
        refresh_expires_in: str = "7d",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: HMAC-SHA256 key, at least 32 characters.
            access_expires_in: Access token lifetime (``"15m"``).
            refresh_expires_in: Refresh token lifetime (``"7d"``).

        Raises:
            ValueError: If secret_key is shorter than 32 characters.
        """
        if len(secret_key) < MIN_SECRET_LENGTH:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = "HS256"
        self._access_expires_in = parse_expiration(access_expires_in)
        self._refresh_expires_in = parse_expiration(refresh_expires_in)

    @property
    def access_token_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return self._access_expires_in

    @property
    def refresh_token_expires_in(self) -> int:
        """Refresh token lifetime in seconds."""
        return self._refresh_expires_in

    def generate_access_token(
        self,
        *,
        user_id: UUID,
        email: str,
        role: str,
        organization_id: UUID | None = None,
        session_id: UUID | None = None,
    ) -> str:
        """Generate a signed access token.

        Returns:
            Encoded JWT (header.payload.signature).
        """
        claims: dict[str, Any] = {"email": email, "role": role}
        if organization_id is not None:
            claims["organization_id"] = str(organization_id)
        if session_id is not None:
            claims["session_id"] = str(session_id)
        return self._encode(
            subject=user_id,
            token_type=ACCESS_TOKEN_TYPE,
            expires_in=self._access_expires_in,
            claims=claims,
        )

    def generate_refresh_token(self, *, user_id: UUID) -> str:
        """Generate a refresh token. Each call yields a distinct token (jti)."""
        return self._encode(
            subject=user_id,
            token_type=REFRESH_TOKEN_TYPE,
            expires_in=self._refresh_expires_in,
        )

    def generate_action_token(
        self,
        *,
        user_id: UUID,
        purpose: str,
        expires_in_seconds: int,
        claims: dict[str, Any] | None = None,
    ) -> str:
        """Generate a purpose-bound token.

        Args:
            user_id: Subject.
            purpose: Value of the ``purpose`` claim.
            expires_in_seconds: Lifetime.
            claims: Extra claims (string-serializable values).

        Returns:
            Encoded JWT.
        """
        return self._encode(
            subject=user_id,
            token_type=ACTION_TOKEN_TYPE,
            expires_in=expires_in_seconds,
            claims={"purpose": purpose, **(claims or {})},
        )

    def validate_token(
        self, token: str, *, expected_type: str = ACCESS_TOKEN_TYPE
    ) -> Result[dict[str, Any], AuthenticationError]:
        """Validate signature, expiry and ``type`` claim.

        Args:
            token: Encoded JWT.
            expected_type: Required ``type`` claim.

        Returns:
            Success(payload), or Failure(AuthenticationError) with code
            TOKEN_EXPIRED or TOKEN_INVALID.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat", "jti"]},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Token has expired",
                )
            )
        except InvalidTokenError as e:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid token signature",
                    details={"reason": type(e).__name__},
                )
            )

        if payload.get("type") != expected_type:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Unexpected token type",
                    details={"expected": expected_type},
                )
            )
        return Success(value=payload)

    def _encode(
        self,
        *,
        subject: UUID,
        token_type: str,
        expires_in: int,
        claims: dict[str, Any] | None = None,
    ) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(subject),
            "type": token_type,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=expires_in)).timestamp()),
            "jti": str(uuid7()),
            **(claims or {}),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token
