"""SQLAlchemy implementation of UnitOfWork."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from stockboard.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Commits the request's AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work with database session.

        Args:
            session: SQLAlchemy async session shared with the repositories
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the session's transaction."""
        with logfire.span("unit_of_work.commit"):
            await self.session.commit()
