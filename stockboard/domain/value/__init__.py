"""Domain value objects for the stock board."""

from stockboard.domain.value.identifiers import PostId
from stockboard.domain.value.types import LikeDelta, PositionType, Sentiment

__all__ = [
    # Identifiers
    "PostId",
    # Types
    "LikeDelta",
    "PositionType",
    "Sentiment",
]
