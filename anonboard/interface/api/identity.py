"""Caller identity for API routes."""

from dataclasses import dataclass

from fastapi import HTTPException, Request, status

from anonboard.domain.service import JWTService
from anonboard.domain.value import UserId

AUTH_COOKIE = "auth_token"
BEARER_PREFIX = "bearer "


@dataclass(frozen=True)
class Caller:
    """Who is making the current request.

    Anonymous when the request carries no token or an invalid one.
    """

    user_id: UserId | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def require_user(self) -> UserId:
        """Return the caller's user ID.

        Raises:
            HTTPException: 401 if the caller is anonymous
        """
        if self.user_id is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Authentication required",
            )
        return self.user_id


def read_token(request: Request) -> str | None:
    """Token from the auth cookie, falling back to an Authorization header."""
    token = request.cookies.get(AUTH_COOKIE)
    if token:
        return token

    header = request.headers.get("authorization", "")
    if header.lower().startswith(BEARER_PREFIX):
        return header[len(BEARER_PREFIX) :].strip() or None
    return None


def resolve_caller(request: Request, jwt_service: JWTService) -> Caller:
    return Caller(user_id=jwt_service.get_user_id_from_token(read_token(request)))
