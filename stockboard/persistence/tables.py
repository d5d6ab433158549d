"""SQLAlchemy table definitions for the stock board.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

sentiment_enum = postgresql.ENUM(
    "bullish", "neutral", "bearish", name="sentiment", create_type=False
)
position_type_enum = postgresql.ENUM(
    "buy", "hold", "sell", name="position_type", create_type=False
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("author", String(100), nullable=False),
    Column("stock_code", String(20), nullable=True),  # e.g. 005930
    Column("stock_name", String(100), nullable=True),
    Column("sentiment", sentiment_enum, nullable=False, server_default="neutral"),
    Column(
        "position_type", position_type_enum, nullable=False, server_default="hold"
    ),
    Column("entry_price", Numeric(15, 2, asdecimal=False), nullable=True),
    Column("target_price", Numeric(15, 2, asdecimal=False), nullable=True),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    ),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint(
        "entry_price IS NULL OR entry_price >= 0", name="entry_price_non_negative"
    ),
    CheckConstraint(
        "target_price IS NULL OR target_price >= 0", name="target_price_non_negative"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_stock_code", posts_table.c.stock_code)
