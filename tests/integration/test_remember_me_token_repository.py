"""Integration tests for RememberMeTokenRepository.

Tests cover:
- Create and load by series (value never persisted)
- Rows of other token kinds are ignored
- Update of hash and timestamps after refresh; unknown series no-op
- Delete; unknown series no-op
- Timestamps come back timezone-aware

Architecture:
- Integration tests with a real SQLite database (aiosqlite)
- Uses db_session fixture (fresh database file per test)
"""

from datetime import UTC, datetime

import pytest
from freezegun import freeze_time

from src.domain.entities.remember_me_token import RememberMeToken
from src.infrastructure.persistence.models.remember_me_token import (
    RememberMeTokenModel,
)
from src.infrastructure.persistence.repositories.remember_me_token_repository import (
    RememberMeTokenRepository,
)


@pytest.mark.integration
class TestRememberMeTokenRepository:
    """Test remember-me token persistence."""

    async def test_create_and_get_by_series(self, db_session):
        """Test a created token loads back without its transport value."""
        # Arrange
        repo = RememberMeTokenRepository(session=db_session)
        token = RememberMeToken.create("user-1", "1 year", "web")

        # Act
        await repo.create_token(token)
        loaded = await repo.get_token_by_series(token.series)

        # Assert
        assert loaded is not None
        assert loaded.series == token.series
        assert loaded.user_id == "user-1"
        assert loaded.guard == "web"
        assert loaded.hash == token.hash
        assert loaded.value is None
        assert loaded.created_at == token.created_at
        assert loaded.expires_at == token.expires_at
        assert loaded.expires_at.tzinfo is not None

    async def test_loaded_token_verifies_secret(self, db_session):
        """Test the stored hash verifies the cookie secret."""
        repo = RememberMeTokenRepository(session=db_session)
        token = RememberMeToken.create("user-1", "1 hour", "web")
        await repo.create_token(token)

        loaded = await repo.get_token_by_series(token.series)
        decoded = RememberMeToken.decode(token.value.get_secret_value())

        assert loaded.verify(decoded.secret) is True

    async def test_get_unknown_series(self, db_session):
        """Test unknown series return None."""
        repo = RememberMeTokenRepository(session=db_session)

        assert await repo.get_token_by_series("missing") is None

    async def test_other_token_types_ignored(self, db_session):
        """Test rows of another token kind are not returned."""
        repo = RememberMeTokenRepository(session=db_session)
        now = datetime.now(UTC)
        db_session.add(
            RememberMeTokenModel(
                series="other-kind-series",
                user_id="user-1",
                guard="web",
                hash="0" * 64,
                type="api_token",
                created_at=now,
                updated_at=now,
                expires_at=now,
            )
        )
        await db_session.commit()

        assert await repo.get_token_by_series("other-kind-series") is None

    async def test_update_after_refresh(self, db_session):
        """Test refresh results are written by series."""
        # Arrange
        repo = RememberMeTokenRepository(session=db_session)
        with freeze_time("2024-01-01 12:00:00"):
            token = RememberMeToken.create("user-1", "1 day", "web")
        await repo.create_token(token)

        with freeze_time("2024-01-01 12:05:00"):
            token.refresh("1 day")

        # Act
        await repo.update_token_by_series(token.series, token)
        loaded = await repo.get_token_by_series(token.series)

        # Assert
        assert loaded.hash == token.hash
        assert loaded.created_at == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert loaded.updated_at == datetime(2024, 1, 1, 12, 5, tzinfo=UTC)
        assert loaded.expires_at == datetime(2024, 1, 2, 12, 5, tzinfo=UTC)

    async def test_update_unknown_series_is_noop(self, db_session):
        """Test updating a deleted token does nothing."""
        repo = RememberMeTokenRepository(session=db_session)
        token = RememberMeToken.create("user-1", "1 day", "web")

        await repo.update_token_by_series(token.series, token)

        assert await repo.get_token_by_series(token.series) is None

    async def test_delete(self, db_session):
        """Test deleted tokens are gone and repeat deletes are harmless."""
        repo = RememberMeTokenRepository(session=db_session)
        token = RememberMeToken.create("user-1", "1 day", "web")
        await repo.create_token(token)

        await repo.delete_token_by_series(token.series)
        await repo.delete_token_by_series(token.series)

        assert await repo.get_token_by_series(token.series) is None

    async def test_tokens_are_independent(self, db_session):
        """Test deleting one series leaves other tokens of the user."""
        repo = RememberMeTokenRepository(session=db_session)
        first = RememberMeToken.create("user-1", "1 day", "web")
        second = RememberMeToken.create("user-1", "1 day", "web")
        await repo.create_token(first)
        await repo.create_token(second)

        await repo.delete_token_by_series(first.series)

        assert await repo.get_token_by_series(second.series) is not None
