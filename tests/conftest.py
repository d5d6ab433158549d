"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import logfire

from stockboard.domain.model import Post
from stockboard.domain.value import PositionType, PostId, Sentiment

# Console output off, nothing sent; spans still run through the code paths
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    post_id: int,
    title: str = "Test Post",
    content: str = "Test content",
    author: str = "tester",
    stock_code: Optional[str] = None,
    stock_name: Optional[str] = None,
    sentiment: Sentiment = Sentiment.NEUTRAL,
    position_type: PositionType = PositionType.HOLD,
    target_price: Optional[float] = None,
    view_count: int = 0,
    like_count: int = 0,
    age: timedelta = timedelta(0),
) -> Post:
    """Build a stored post for seeding in-memory repositories.

    Args:
        post_id: Post ID
        age: How long ago the post was created
    """
    created_at = datetime.now(timezone.utc) - age
    return Post(
        id=PostId(post_id),
        title=title,
        content=content,
        author=author,
        stock_code=stock_code,
        stock_name=stock_name,
        sentiment=sentiment,
        position_type=position_type,
        target_price=target_price,
        view_count=view_count,
        like_count=like_count,
        created_at=created_at,
        updated_at=created_at,
    )
