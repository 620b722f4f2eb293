"""Unit tests for caller identity resolution."""

from uuid import uuid4

import pytest
from fastapi import HTTPException
from starlette.requests import Request

from anonboard.config import AuthSettings
from anonboard.domain.service import JWTService
from anonboard.domain.value import UserId
from anonboard.interface.api.identity import Caller, read_token, resolve_caller


def make_request(headers: dict[str, str] | None = None) -> Request:
    raw_headers = [
        (name.lower().encode(), value.encode())
        for name, value in (headers or {}).items()
    ]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw_headers})


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=AuthSettings(jwt_secret="test-secret-0123456789abcdef0123456789"))


class TestReadToken:
    """Tests for token extraction."""

    def test_cookie_preferred(self):
        request = make_request(
            {"Cookie": "auth_token=from-cookie", "Authorization": "Bearer from-header"}
        )

        assert read_token(request) == "from-cookie"

    def test_bearer_header(self):
        request = make_request({"Authorization": "Bearer abc.def"})

        assert read_token(request) == "abc.def"

    def test_no_token(self):
        assert read_token(make_request()) is None
        assert read_token(make_request({"Authorization": "Basic xyz"})) is None


class TestResolveCaller:
    """Tests for turning a request into a Caller."""

    def test_valid_token_identifies_user(self, jwt_service):
        user_id = UserId(uuid4())
        token = jwt_service.create_token(str(user_id))

        caller = resolve_caller(
            make_request({"Authorization": f"Bearer {token}"}), jwt_service
        )

        assert caller.user_id == user_id
        assert caller.is_authenticated is True

    def test_invalid_token_is_anonymous(self, jwt_service):
        caller = resolve_caller(
            make_request({"Cookie": "auth_token=garbage"}), jwt_service
        )

        assert caller.user_id is None

    def test_token_signed_with_other_secret_is_anonymous(self, jwt_service):
        other = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret-0123456789abcdef012345678"))
        token = other.create_token(str(uuid4()))

        caller = resolve_caller(
            make_request({"Authorization": f"Bearer {token}"}), jwt_service
        )

        assert caller.is_authenticated is False


class TestRequireUser:
    """Tests for Caller.require_user."""

    def test_anonymous_caller_gets_401(self):
        with pytest.raises(HTTPException) as exc_info:
            Caller().require_user()
        assert exc_info.value.status_code == 401

    def test_authenticated_caller_returns_id(self):
        user_id = UserId(uuid4())

        assert Caller(user_id=user_id).require_user() == user_id
