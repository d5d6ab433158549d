"""PostgreSQL implementation of Post repository."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import logfire
from sqlalchemy import case, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stockboard.domain.model import NewPost, Post, PostChanges, StockTrendSummary
from stockboard.domain.repository.post import PostFilters, PostPage, PostRepository
from stockboard.domain.value import LikeDelta, PostId, Sentiment
from stockboard.persistence.mappers import (
    changes_to_dict,
    new_post_to_dict,
    row_to_post,
    row_to_trend,
)
from stockboard.persistence.tables import posts_table


def _apply_filters(stmt, filters: Optional[PostFilters]):
    """Add WHERE clauses for every filter that is set."""
    if filters is None:
        return stmt
    if filters.sentiment is not None:
        stmt = stmt.where(posts_table.c.sentiment == filters.sentiment.value)
    if filters.stock_code is not None:
        stmt = stmt.where(posts_table.c.stock_code == filters.stock_code)
    if filters.position_type is not None:
        stmt = stmt.where(posts_table.c.position_type == filters.position_type.value)
    return stmt


def _sentiment_count(sentiment: Sentiment):
    return func.sum(case((posts_table.c.sentiment == sentiment.value, 1), else_=0))


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=post_id)
                return None

            return row_to_post(row._asdict())

    async def find_all(self) -> List[Post]:
        """Find every post, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(
                desc(posts_table.c.created_at), desc(posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_page(
        self,
        offset: int,
        limit: int,
        filters: Optional[PostFilters] = None,
    ) -> PostPage:
        """Find one page of posts with filtering."""
        with logfire.span(
            "post_repository.find_page",
            offset=offset,
            limit=limit,
            sentiment=filters.sentiment.value if filters and filters.sentiment else None,
            stock_code=filters.stock_code if filters else None,
            position_type=(
                filters.position_type.value
                if filters and filters.position_type
                else None
            ),
        ):
            count_stmt = _apply_filters(
                select(func.count()).select_from(posts_table), filters
            )
            total = (await self.session.execute(count_stmt)).scalar() or 0

            stmt = (
                _apply_filters(select(posts_table), filters)
                .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            items = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found page", count=len(items), total=total)
            return PostPage(items=items, total=total)

    async def create(self, new_post: NewPost) -> Post:
        """Insert a post and return the stored row."""
        with logfire.span(
            "post_repository.create",
            title=new_post.title,
            stock_code=new_post.stock_code,
        ):
            stmt = (
                insert(posts_table)
                .values(**new_post_to_dict(new_post))
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            post = row_to_post(row._asdict())
            logfire.info("Inserted post", post_id=post.id)
            return post

    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Apply supplied fields and refresh updated_at."""
        values = changes_to_dict(changes)
        with logfire.span(
            "post_repository.update", post_id=post_id, fields=sorted(values)
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(**values, updated_at=func.now())
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Post not found for update", post_id=post_id)
                return None

            await self.session.flush()
            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=post_id):
            stmt = delete(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return (result.rowcount or 0) > 0

    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment view count by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(view_count=posts_table.c.view_count + 1, updated_at=func.now())
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_post(row._asdict())

    async def update_like_count(
        self, post_id: PostId, delta: LikeDelta
    ) -> Optional[Post]:
        """Atomically add delta to like count (minimum 0)."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                like_count=func.greatest(posts_table.c.like_count + int(delta), 0),
                updated_at=func.now(),
            )
            .returning(posts_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_post(row._asdict())

    async def find_trending_stocks(
        self, limit: int, days: int
    ) -> List[StockTrendSummary]:
        """Aggregate recent posts per (stock code, stock name)."""
        with logfire.span("post_repository.find_trending_stocks", limit=limit, days=days):
            since = datetime.now(timezone.utc) - timedelta(days=days)

            post_count = func.count().label("post_count")
            last_posted_at = func.max(posts_table.c.created_at).label("last_posted_at")

            stmt = (
                select(
                    posts_table.c.stock_code,
                    posts_table.c.stock_name,
                    post_count,
                    _sentiment_count(Sentiment.BULLISH).label("bullish_count"),
                    _sentiment_count(Sentiment.NEUTRAL).label("neutral_count"),
                    _sentiment_count(Sentiment.BEARISH).label("bearish_count"),
                    func.avg(posts_table.c.target_price).label("avg_target_price"),
                    last_posted_at,
                )
                .where(
                    posts_table.c.stock_code.is_not(None),
                    posts_table.c.created_at >= since,
                )
                .group_by(posts_table.c.stock_code, posts_table.c.stock_name)
                .order_by(desc(post_count), desc(last_posted_at))
                .limit(limit)
            )

            result = await self.session.execute(stmt)
            trends = [
                row_to_trend(row._asdict())
                for row in result.fetchall()
                if row.stock_code is not None
            ]

            logfire.info("Trending stocks computed", count=len(trends))
            return trends
