"""JSON shapes of the HTTP API.

The frontend speaks camelCase; these models translate between that and the
snake_case domain models. Every response is wrapped in an envelope:
``{"success": true, "data": ...}``.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from stockboard.domain.model import Post, StockTrendSummary
from stockboard.domain.value import PositionType, Sentiment

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""

    success: bool = True
    data: T


class MessageResponse(BaseModel):
    """Success envelope carrying only a message."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Error envelope."""

    success: bool = False
    error: str


class PostResponse(CamelModel):
    """Post as returned by the API."""

    id: int
    title: str
    content: str
    author: str
    stock_code: Optional[str] = None
    stock_name: Optional[str] = None
    sentiment: Sentiment
    position_type: PositionType
    entry_price: Optional[float] = None
    target_price: Optional[float] = None
    view_count: int
    like_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls.model_validate(post.model_dump())


class PostsPageResponse(CamelModel):
    """One page of posts."""

    items: list[PostResponse]
    total: int
    page: int
    page_size: int


class StockTrendResponse(CamelModel):
    """Trend summary for one stock."""

    stock_code: str
    stock_name: Optional[str] = None
    post_count: int
    bullish_count: int
    neutral_count: int
    bearish_count: int
    avg_target_price: Optional[float] = None
    last_posted_at: datetime

    @classmethod
    def from_summary(cls, summary: StockTrendSummary) -> "StockTrendResponse":
        return cls.model_validate(summary.model_dump())


class CreatePostAPIRequest(CamelModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    author: str = Field(min_length=1, max_length=100)
    stock_code: Optional[str] = Field(default=None, max_length=20)
    stock_name: Optional[str] = Field(default=None, max_length=100)
    sentiment: Optional[Sentiment] = None
    position_type: Optional[PositionType] = None
    entry_price: Optional[float] = None
    target_price: Optional[float] = None


class UpdatePostAPIRequest(CamelModel):
    """API request for updating a post (any subset of create fields)."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = Field(default=None, min_length=1, max_length=100)
    stock_code: Optional[str] = Field(default=None, max_length=20)
    stock_name: Optional[str] = Field(default=None, max_length=100)
    sentiment: Optional[Sentiment] = None
    position_type: Optional[PositionType] = None
    entry_price: Optional[float] = None
    target_price: Optional[float] = None
