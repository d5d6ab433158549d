"""Get trending stocks use case."""

import math

import logfire
from pydantic import BaseModel

from stockboard.domain.model import StockTrendSummary
from stockboard.domain.repository import PostRepository

DEFAULT_LIMIT = 5
MAX_LIMIT = 20
DEFAULT_DAYS = 7
MAX_DAYS = 90


def _clamp(value: float | None, default: int, upper: int) -> int:
    if value is None or not math.isfinite(value):
        value = default
    return min(upper, max(1, math.floor(value)))


class GetTrendingStocksRequest(BaseModel):
    """Trending stocks request.

    Missing or non-finite values fall back to the defaults.
    """

    limit: float | None = None
    days: float | None = None


class GetTrendingStocksUseCase:
    """Use case for the most discussed stocks over a recent window."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize get trending stocks use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    def resolve_window(self, request: GetTrendingStocksRequest) -> tuple[int, int]:
        """Clamp limit to [1, 20] (default 5) and days to [1, 90] (default 7)."""
        return (
            _clamp(request.limit, DEFAULT_LIMIT, MAX_LIMIT),
            _clamp(request.days, DEFAULT_DAYS, MAX_DAYS),
        )

    async def execute(
        self, request: GetTrendingStocksRequest
    ) -> list[StockTrendSummary]:
        """Execute trending stocks flow.

        Args:
            request: Requested limit and look-back window

        Returns:
            Trend summaries ordered by post count, busiest first
        """
        limit, days = self.resolve_window(request)

        with logfire.span("get_trending_stocks.execute", limit=limit, days=days):
            trends = await self.post_repository.find_trending_stocks(
                limit=limit, days=days
            )
            logfire.info("Trending stocks listed", count=len(trends))
            return trends
