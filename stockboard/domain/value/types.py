"""Domain value types for the stock board."""

from enum import Enum, IntEnum


class Sentiment(str, Enum):
    """Author's outlook on the stock."""

    BULLISH = "bullish"
    NEUTRAL = "neutral"
    BEARISH = "bearish"


class PositionType(str, Enum):
    """Position the author takes (or recommends) on the stock."""

    BUY = "buy"
    HOLD = "hold"
    SELL = "sell"


class LikeDelta(IntEnum):
    """Allowed like-count adjustments."""

    LIKE = 1
    UNLIKE = -1
