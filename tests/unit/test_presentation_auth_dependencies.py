"""Unit tests for the session guard route dependencies.

Tests cover:
- CurrentUser authenticates through the request's guard
- CurrentUser and SessionGuardDep share one guard per request
- Authentication failures surface as 401 problem responses

Architecture:
- Auth router mounted on a minimal FastAPI app
- get_session_guard overridden with a mocked guard
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.domain.entities.user import User
from src.domain.errors import InvalidAuthSession
from src.presentation.api.middleware.auth_dependencies import get_session_guard
from src.presentation.api.v1.auth import router
from src.presentation.api.v1.errors import register_exception_handlers


@pytest.fixture
def user():
    return User(id=uuid4(), email="alice@example.com", password_hash="$2b$04$hash")


@pytest.fixture
def guard(user):
    mock_guard = MagicMock()
    mock_guard.authenticate = AsyncMock(return_value=user)
    mock_guard.via_remember = True
    return mock_guard


@pytest.fixture
def guard_calls():
    return []


@pytest.fixture
def guard_factory(guard, guard_calls):
    def build_guard():
        guard_calls.append(guard)
        return guard

    return build_guard


@pytest.fixture
def client(guard_factory):
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)
    app.dependency_overrides[get_session_guard] = guard_factory
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.mark.unit
class TestCurrentUser:
    """Test the CurrentUser dependency on /auth/me."""

    def test_me_returns_authenticated_user(self, client, user, guard):
        """Test the route receives the user the guard authenticated."""
        # Act
        response = client.get("/auth/me")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "id": str(user.id),
            "email": "alice@example.com",
            "via_remember": True,
        }
        guard.authenticate.assert_awaited_once()

    def test_one_guard_per_request(self, client, guard_calls):
        """Test both dependencies resolve to the same guard instance."""
        client.get("/auth/me")
        client.get("/auth/me")

        assert len(guard_calls) == 2

    def test_authentication_failure_is_401(self, client, guard):
        """Test a rejected request renders the auth problem response."""
        # Arrange
        guard.authenticate.side_effect = InvalidAuthSession(guard_name="web")

        # Act
        response = client.get("/auth/me")

        # Assert
        assert response.status_code == 401
        assert response.json()["code"] == "invalid_auth_session"
