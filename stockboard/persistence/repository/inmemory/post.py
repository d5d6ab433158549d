"""In-memory post repository for testing."""

from collections import defaultdict
from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Optional

from stockboard.domain.model import NewPost, Post, PostChanges, StockTrendSummary
from stockboard.domain.repository.post import PostFilters, PostPage, PostRepository
from stockboard.domain.value import LikeDelta, PostId, Sentiment


def _newest_first(posts: list[Post]) -> list[Post]:
    return sorted(posts, key=lambda p: (p.created_at, p.id), reverse=True)


def _matches(post: Post, filters: Optional[PostFilters]) -> bool:
    if filters is None:
        return True
    if filters.sentiment is not None and post.sentiment != filters.sentiment:
        return False
    if filters.stock_code is not None and post.stock_code != filters.stock_code:
        return False
    if filters.position_type is not None and post.position_type != filters.position_type:
        return False
    return True


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    IDs are assigned sequentially from 1, like a serial column.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    async def add(self, post: Post) -> Post:
        """Store a fully built post as-is (test seeding helper)."""
        self._posts[post.id] = post
        return post

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find every post, newest first."""
        return _newest_first(list(self._posts.values()))

    async def find_page(
        self,
        offset: int,
        limit: int,
        filters: Optional[PostFilters] = None,
    ) -> PostPage:
        """Find one page of posts with filtering."""
        posts = _newest_first(
            [p for p in self._posts.values() if _matches(p, filters)]
        )
        return PostPage(items=posts[offset : offset + limit], total=len(posts))

    async def create(self, new_post: NewPost) -> Post:
        """Create a post with the next free ID."""
        post_id = PostId(next(self._ids))
        while post_id in self._posts:
            post_id = PostId(next(self._ids))

        now = datetime.now(timezone.utc)
        post = Post(
            id=post_id,
            **new_post.model_dump(),
            view_count=0,
            like_count=0,
            created_at=now,
            updated_at=now,
        )
        self._posts[post_id] = post
        return post

    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Apply supplied fields and refresh updated_at."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.model_copy(
            update={**changes.values(), "updated_at": datetime.now(timezone.utc)}
        )
        self._posts[post_id] = updated
        return updated

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self._posts.pop(post_id, None) is not None

    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Increment view count by 1."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.model_copy(
            update={
                "view_count": post.view_count + 1,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._posts[post_id] = updated
        return updated

    async def update_like_count(
        self, post_id: PostId, delta: LikeDelta
    ) -> Optional[Post]:
        """Add delta to like count (minimum 0)."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        updated = post.model_copy(
            update={
                "like_count": max(0, post.like_count + int(delta)),
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._posts[post_id] = updated
        return updated

    async def find_trending_stocks(
        self, limit: int, days: int
    ) -> list[StockTrendSummary]:
        """Aggregate recent posts per (stock code, stock name)."""
        since = datetime.now(timezone.utc) - timedelta(days=days)

        groups: dict[tuple[str, Optional[str]], list[Post]] = defaultdict(list)
        for post in self._posts.values():
            if post.stock_code is None or post.created_at < since:
                continue
            groups[(post.stock_code, post.stock_name)].append(post)

        trends = []
        for (stock_code, stock_name), posts in groups.items():
            target_prices = [
                p.target_price for p in posts if p.target_price is not None
            ]
            trends.append(
                StockTrendSummary(
                    stock_code=stock_code,
                    stock_name=stock_name,
                    post_count=len(posts),
                    bullish_count=sum(
                        1 for p in posts if p.sentiment == Sentiment.BULLISH
                    ),
                    neutral_count=sum(
                        1 for p in posts if p.sentiment == Sentiment.NEUTRAL
                    ),
                    bearish_count=sum(
                        1 for p in posts if p.sentiment == Sentiment.BEARISH
                    ),
                    avg_target_price=(
                        sum(target_prices) / len(target_prices)
                        if target_prices
                        else None
                    ),
                    last_posted_at=max(p.created_at for p in posts),
                )
            )

        trends.sort(key=lambda t: (t.post_count, t.last_posted_at), reverse=True)
        return trends[:limit]
