"""Stock trend summary (derived, read-only)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stockboard.domain.model.common import DomainModel


class StockTrendSummary(DomainModel):
    """Activity around one stock over a recent window.

    Computed on demand from posts grouped by stock code and name; never
    persisted.
    """

    stock_code: str
    stock_name: Optional[str] = None
    post_count: int = Field(ge=0)
    bullish_count: int = Field(default=0, ge=0)
    neutral_count: int = Field(default=0, ge=0)
    bearish_count: int = Field(default=0, ge=0)
    avg_target_price: Optional[float] = None
    last_posted_at: datetime
