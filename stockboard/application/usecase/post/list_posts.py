"""List posts use cases."""

import math

import logfire
from pydantic import BaseModel

from stockboard.domain.model import Post
from stockboard.domain.repository import PostFilters, PostRepository
from stockboard.domain.value import PositionType, Sentiment

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Upper bound keeps OFFSET within bigint
MAX_PAGE = 1_000_000


def _floor_or_default(value: float | None, default: int) -> int:
    if value is None or not math.isfinite(value):
        return default
    return math.floor(value)


class GetPostsPageRequest(BaseModel):
    """Paged list request.

    Numbers are accepted as-is and clamped by the use case.
    """

    page: float | None = None
    page_size: float | None = None
    sentiment: Sentiment | None = None
    position_type: PositionType | None = None
    stock_code: str | None = None


class GetPostsPageResponse(BaseModel):
    """Paged list response."""

    items: list[Post]
    total: int
    page: int
    page_size: int


class GetAllPostsUseCase:
    """Use case for listing every post, newest first."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize get all posts use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self) -> list[Post]:
        """Execute list-all flow.

        Returns:
            All posts ordered by creation time, newest first
        """
        with logfire.span("get_all_posts.execute"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts


class GetPostsPageUseCase:
    """Use case for listing posts with filtering and pagination."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize get posts page use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: GetPostsPageRequest) -> GetPostsPageResponse:
        """Execute paged list flow.

        - page is clamped to [1, 1_000_000]
        - page_size is clamped to [1, 100] (default 10)
        - blank stock codes are ignored

        Args:
            request: Page request with optional filters

        Returns:
            Page items, total matching posts, and the effective page/page_size
        """
        page = min(MAX_PAGE, max(1, _floor_or_default(request.page, 1)))
        page_size = min(
            MAX_PAGE_SIZE,
            max(1, _floor_or_default(request.page_size, DEFAULT_PAGE_SIZE)),
        )
        offset = (page - 1) * page_size

        stock_code = request.stock_code.strip() if request.stock_code else None
        filters = PostFilters(
            sentiment=request.sentiment,
            stock_code=stock_code or None,
            position_type=request.position_type,
        )

        with logfire.span(
            "get_posts_page.execute",
            page=page,
            page_size=page_size,
            filtered=not filters.is_empty(),
        ):
            result = await self.post_repository.find_page(
                offset, page_size, None if filters.is_empty() else filters
            )

            logfire.info("Page listed", count=len(result.items), total=result.total)

            return GetPostsPageResponse(
                items=result.items,
                total=result.total,
                page=page,
                page_size=page_size,
            )
