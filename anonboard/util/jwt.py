"""Caller token encoding and verification.

The board never logs anyone in. Tokens are minted by the account service
(and by tests) and only carry the opaque user id.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from anonboard.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a caller token."""

    user_id: str
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """Token could not be verified."""


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token identifying user_id, valid for jwt_expiry_days."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired, tampered with or malformed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    return TokenPayload(**claims)
