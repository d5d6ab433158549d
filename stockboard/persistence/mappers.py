"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from stockboard.domain.model import NewPost, Post, PostChanges, StockTrendSummary
from stockboard.domain.value import PositionType, PostId, Sentiment


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        author=row["author"],
        stock_code=row.get("stock_code"),
        stock_name=row.get("stock_name"),
        sentiment=Sentiment(row["sentiment"]),
        position_type=PositionType(row["position_type"]),
        entry_price=row.get("entry_price"),
        target_price=row.get("target_price"),
        view_count=row["view_count"],
        like_count=row["like_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_post_to_dict(new_post: NewPost) -> Dict[str, Any]:
    """Convert NewPost to a dict suitable for insertion.

    Args:
        new_post: Normalized new post

    Returns:
        Column values (enums as their string values)
    """
    values = new_post.model_dump()
    values["sentiment"] = _enum_value(new_post.sentiment)
    values["position_type"] = _enum_value(new_post.position_type)
    return values


def changes_to_dict(changes: PostChanges) -> Dict[str, Any]:
    """Convert PostChanges to a dict of supplied columns only.

    Args:
        changes: Partial update

    Returns:
        Column values for the UPDATE statement
    """
    return {field: _enum_value(value) for field, value in changes.values().items()}


def row_to_trend(row: Dict[str, Any]) -> StockTrendSummary:
    """Convert an aggregate row to StockTrendSummary.

    Args:
        row: Aggregate row as dict

    Returns:
        StockTrendSummary domain model
    """
    avg_target_price = row.get("avg_target_price")
    return StockTrendSummary(
        stock_code=row["stock_code"],
        stock_name=row.get("stock_name"),
        post_count=int(row["post_count"]),
        bullish_count=int(row["bullish_count"] or 0),
        neutral_count=int(row["neutral_count"] or 0),
        bearish_count=int(row["bearish_count"] or 0),
        avg_target_price=(
            float(avg_target_price) if avg_target_price is not None else None
        ),
        last_posted_at=row["last_posted_at"],
    )
