"""Domain model entities for the stock board."""

from stockboard.domain.model.post import NewPost, Post, PostChanges
from stockboard.domain.model.trend import StockTrendSummary

__all__ = [
    "NewPost",
    "Post",
    "PostChanges",
    "StockTrendSummary",
]
