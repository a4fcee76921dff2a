"""Access token helpers.

The auth service issues the ``auth_token`` cookie; this service only
verifies it. ``create_token`` produces the same claims and is used by
local tooling and the test suite.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel

from discuss.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "email", "exp", "iat"]


class TokenPayload(BaseModel):
    """Verified claims of an access token."""

    sub: UUID
    email: str
    iat: datetime
    exp: datetime

    @property
    def user_id(self) -> UUID:
        return self.sub


class JWTError(Exception):
    """Token missing a claim, badly signed or expired."""

    pass


def create_token(
    user_id: UUID,
    email: str,
    settings: AuthSettings,
    issued_at: datetime | None = None,
) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token and check its signature, expiry and required claims.

    Raises:
        JWTError: If any check fails
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValueError as e:
        raise JWTError("Token claims are malformed") from e
