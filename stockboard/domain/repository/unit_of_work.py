"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transaction boundary for one request.

    Writes become durable only once ``commit`` returns, so callers commit
    before they report success.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make every write since the last commit durable."""
        pass
