"""Post aggregate root.

A post is an opinion about a stock: free text plus a sentiment, a position
and optional entry/target prices.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field

from stockboard.domain.model.common import DomainModel
from stockboard.domain.value import PositionType, PostId, Sentiment


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Post(DomainModel):
    """Post aggregate root.

    Identifier and timestamps are assigned by storage. Counters never go
    below zero.
    """

    id: PostId = Field(gt=0)
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1, max_length=100)
    stock_code: Optional[str] = Field(default=None, max_length=20)
    stock_name: Optional[str] = Field(default=None, max_length=100)
    sentiment: Sentiment = Sentiment.NEUTRAL
    position_type: PositionType = PositionType.HOLD
    entry_price: Optional[float] = Field(default=None, ge=0)
    target_price: Optional[float] = Field(default=None, ge=0)
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class NewPost(DomainModel):
    """Normalized payload for creating a post.

    Built by PostService.build_new_post; strings are already trimmed and
    blank optional values are None.
    """

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1, max_length=100)
    stock_code: Optional[str] = Field(default=None, max_length=20)
    stock_name: Optional[str] = Field(default=None, max_length=100)
    sentiment: Sentiment = Sentiment.NEUTRAL
    position_type: PositionType = PositionType.HOLD
    entry_price: Optional[float] = Field(default=None, ge=0)
    target_price: Optional[float] = Field(default=None, ge=0)


class PostChanges(DomainModel):
    """Partial update for a post.

    Only fields that were explicitly set are applied; an explicit None on an
    optional field clears the stored value.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = Field(default=None, min_length=1, max_length=100)
    stock_code: Optional[str] = Field(default=None, max_length=20)
    stock_name: Optional[str] = Field(default=None, max_length=100)
    sentiment: Optional[Sentiment] = None
    position_type: Optional[PositionType] = None
    entry_price: Optional[float] = Field(default=None, ge=0)
    target_price: Optional[float] = Field(default=None, ge=0)

    def values(self) -> dict[str, Any]:
        """Return only the supplied fields, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)

    def is_empty(self) -> bool:
        return not self.model_fields_set
