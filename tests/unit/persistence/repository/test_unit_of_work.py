"""Unit tests for SqlAlchemyUnitOfWork."""

import pytest

from stockboard.persistence.repository import SqlAlchemyUnitOfWork


class FakeSession:
    """Stands in for AsyncSession; records commits."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.commits = 0

    async def commit(self) -> None:
        if self.error is not None:
            raise self.error
        self.commits += 1


class TestSqlAlchemyUnitOfWork:
    """Tests for SqlAlchemyUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_commits_session(self):
        session = FakeSession()

        await SqlAlchemyUnitOfWork(session).commit()

        assert session.commits == 1

    @pytest.mark.asyncio
    async def test_commit_error_propagates(self):
        """A failed commit reaches the caller unchanged."""
        session = FakeSession(RuntimeError("commit failed: connection lost"))

        with pytest.raises(RuntimeError, match="connection lost"):
            await SqlAlchemyUnitOfWork(session).commit()
