"""initial_schema

Create the stock board schema:
- sentiment / position_type ENUM types
- posts (opinions about stocks with price levels and counters)

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE sentiment AS ENUM ('bullish', 'neutral', 'bearish');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE position_type AS ENUM ('buy', 'hold', 'sell');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(100), nullable=False),
        sa.Column("stock_code", sa.String(20), nullable=True),
        sa.Column("stock_name", sa.String(100), nullable=True),
        sa.Column(
            "sentiment",
            postgresql.ENUM(name="sentiment", create_type=False),
            nullable=False,
            server_default="neutral",
        ),
        sa.Column(
            "position_type",
            postgresql.ENUM(name="position_type", create_type=False),
            nullable=False,
            server_default="hold",
        ),
        sa.Column("entry_price", sa.Numeric(15, 2), nullable=True),
        sa.Column("target_price", sa.Numeric(15, 2), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("view_count >= 0", name="view_count_non_negative"),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
        sa.CheckConstraint(
            "entry_price IS NULL OR entry_price >= 0",
            name="entry_price_non_negative",
        ),
        sa.CheckConstraint(
            "target_price IS NULL OR target_price >= 0",
            name="target_price_non_negative",
        ),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_stock_code", "posts", ["stock_code"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_posts_stock_code", table_name="posts")
    op.drop_index("idx_posts_created_at", table_name="posts")
    op.drop_table("posts")

    op.execute("DROP TYPE IF EXISTS position_type")
    op.execute("DROP TYPE IF EXISTS sentiment")
