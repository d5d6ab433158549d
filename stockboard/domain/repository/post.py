"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stockboard.domain.model import NewPost, Post, PostChanges, StockTrendSummary
from stockboard.domain.value import LikeDelta, PositionType, PostId, Sentiment
from stockboard.domain.value.common import ValueObject


class PostFilters(ValueObject):
    """Optional filters for paged listings.

    Every filter that is set must match (logical AND).
    """

    sentiment: Optional[Sentiment] = None
    stock_code: Optional[str] = None  # Exact match
    position_type: Optional[PositionType] = None

    def is_empty(self) -> bool:
        return (
            self.sentiment is None
            and self.stock_code is None
            and self.position_type is None
        )


class PostPage(ValueObject):
    """One page of posts plus the size of the whole filtered set."""

    items: list[Post]
    total: int


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find every post, newest first.

        Returns:
            All posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        offset: int,
        limit: int,
        filters: Optional[PostFilters] = None,
    ) -> PostPage:
        """Find one page of posts, newest first.

        Args:
            offset: Number of posts to skip
            limit: Maximum number of posts to return
            filters: Optional sentiment / stock code / position filters

        Returns:
            Page items and the total count of posts matching the filters
        """
        pass

    @abstractmethod
    async def create(self, new_post: NewPost) -> Post:
        """Create a post.

        Storage assigns the identifier and both timestamps.

        Args:
            new_post: Normalized post data

        Returns:
            The stored post
        """
        pass

    @abstractmethod
    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Apply a partial update to a post.

        Only supplied fields are written; updated_at is refreshed.

        Args:
            post_id: ID of the post to update
            changes: Fields to change

        Returns:
            Updated post, or None if no post has this ID
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was removed
        """
        pass

    @abstractmethod
    async def increment_view_count(self, post_id: PostId) -> Optional[Post]:
        """Atomically increment view count by 1.

        Args:
            post_id: The post ID

        Returns:
            Updated post, or None if not found
        """
        pass

    @abstractmethod
    async def update_like_count(
        self, post_id: PostId, delta: LikeDelta
    ) -> Optional[Post]:
        """Atomically add delta to the like count (minimum 0).

        Args:
            post_id: The post ID
            delta: +1 to like, -1 to unlike

        Returns:
            Updated post, or None if not found
        """
        pass

    @abstractmethod
    async def find_trending_stocks(
        self, limit: int, days: int
    ) -> List[StockTrendSummary]:
        """Aggregate recent posts per stock.

        Considers posts with a stock code created within the last ``days``
        days, grouped by (stock code, stock name), ordered by post count
        descending.

        Args:
            limit: Maximum number of stocks to return
            days: Size of the look-back window in days

        Returns:
            Trend summaries, busiest stock first
        """
        pass
