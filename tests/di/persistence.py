"""Mock persistence providers for testing."""

from dishka import Scope, provide

from stockboard.domain.repository import PostRepository, UnitOfWork
from stockboard.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUnitOfWork,
)
from stockboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope for the store so every request against one container sees
    the same posts; each test builds its own container, so tests stay
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide in-memory unit of work (counts commits)."""
        return InMemoryUnitOfWork()
