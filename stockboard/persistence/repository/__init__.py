"""PostgreSQL repository implementations."""

from stockboard.persistence.repository.post import PostgresPostRepository
from stockboard.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "PostgresPostRepository",
    "SqlAlchemyUnitOfWork",
]
