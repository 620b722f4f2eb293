"""Unit tests for end-of-request session handling."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from anonboard.domain.error import NotFoundError
from anonboard.persistence.database import finish_session


def _session(is_active: bool = True) -> MagicMock:
    session = MagicMock()
    session.is_active = is_active
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


class TestFinishSession:
    """Tests for finish_session."""

    @pytest.mark.asyncio
    async def test_clean_request_commits(self):
        session = _session()

        await finish_session(session, None)

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_request_rolls_back(self):
        """An exception sent back by the container must not be committed."""
        session = _session()

        await finish_session(session, NotFoundError("Post", "missing"))

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_transaction_rolls_back(self):
        """A handled database error leaves nothing to commit."""
        session = _session(is_active=False)

        await finish_session(session, None)

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
