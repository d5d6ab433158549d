"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryPostRepository",
    "InMemoryUnitOfWork",
]
