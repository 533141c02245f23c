"""JWT utilities for authentication."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel

from appointme.config import get_settings

ACCESS = "access"
REFRESH = "refresh"


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # Subject - user_id
    role: str
    business_id: str | None = None  # Set for business representatives
    exp: datetime  # Expiration time
    iat: datetime  # Issued at
    type: str = ACCESS  # Token type

    @property
    def user_id(self) -> UUID | None:
        try:
            return UUID(self.sub)
        except ValueError:
            return None


def _create_token(
    user_id: UUID,
    role: str,
    business_id: UUID | None,
    token_type: str,
    lifetime: timedelta,
) -> str:
    settings = get_settings()

    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "role": role,
        "business_id": str(business_id) if business_id else None,
        "exp": now + lifetime,
        "iat": now,
        "type": token_type,
    }

    return jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def create_access_token(user_id: UUID, role: str, business_id: UUID | None = None) -> str:
    """Create a short-lived JWT access token for a user."""
    settings = get_settings()
    return _create_token(
        user_id,
        role,
        business_id,
        ACCESS,
        timedelta(minutes=settings.jwt_access_token_expire_minutes),
    )


def create_refresh_token(user_id: UUID, role: str, business_id: UUID | None = None) -> str:
    """Create a long-lived JWT refresh token for a user."""
    settings = get_settings()
    return _create_token(
        user_id,
        role,
        business_id,
        REFRESH,
        timedelta(days=settings.jwt_refresh_token_expire_days),
    )


def decode_token(token: str, expected_type: str = ACCESS) -> TokenPayload | None:
    """Decode and validate a JWT.

    Returns TokenPayload if valid, None if invalid, expired or of the wrong type.
    """
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None

    if payload.get("type", ACCESS) != expected_type or "role" not in payload:
        return None

    return TokenPayload(
        sub=payload["sub"],
        role=payload["role"],
        business_id=payload.get("business_id"),
        exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        iat=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
        type=payload.get("type", ACCESS),
    )
