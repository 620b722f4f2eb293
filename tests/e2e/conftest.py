"""Fixtures for end-to-end API tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from anonboard.config import Settings
from anonboard.domain.service import JWTService
from anonboard.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory repositories."""
    app_instance = create_app(build_test_container())
    return TestClient(app_instance)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=Settings().auth)


@pytest.fixture
def make_auth(jwt_service):
    """Return a factory of Authorization headers for fresh users."""

    def _make_auth(user_id: str | None = None) -> dict[str, str]:
        token = jwt_service.create_token(user_id or str(uuid4()))
        return {"Authorization": f"Bearer {token}"}

    return _make_auth
