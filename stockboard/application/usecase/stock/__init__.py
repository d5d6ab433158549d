"""Stock use cases."""

from .get_trending_stocks import GetTrendingStocksRequest, GetTrendingStocksUseCase

__all__ = [
    "GetTrendingStocksRequest",
    "GetTrendingStocksUseCase",
]
