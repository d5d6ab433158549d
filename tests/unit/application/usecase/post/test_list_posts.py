"""Unit tests for GetAllPostsUseCase and GetPostsPageUseCase."""

from datetime import timedelta

import pytest

from stockboard.application.usecase.post import (
    GetAllPostsUseCase,
    GetPostsPageRequest,
    GetPostsPageUseCase,
)
from stockboard.application.usecase.post.list_posts import MAX_PAGE, MAX_PAGE_SIZE
from stockboard.domain.repository import PostRepository
from stockboard.domain.value import PositionType, Sentiment
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(post_repo: PostRepository, count: int) -> None:
    """Seed posts 1..count; higher IDs are newer."""
    for post_id in range(1, count + 1):
        await post_repo.add(
            make_post(post_id, title=f"Post {post_id}", age=timedelta(hours=count - post_id))
        )


class TestGetAllPostsUseCase:
    """Tests for GetAllPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_newest_first(self, unit_env):
        """Every post is returned, newest first."""
        use_case = await unit_env.get(GetAllPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await _seed(post_repo, 3)

        posts = await use_case.execute()

        assert [p.id for p in posts] == [3, 2, 1]

    @pytest.mark.asyncio
    async def test_empty_board(self, unit_env):
        """No posts gives an empty list."""
        use_case = await unit_env.get(GetAllPostsUseCase)

        assert await use_case.execute() == []


class TestGetPostsPageUseCase:
    """Tests for GetPostsPageUseCase."""

    @pytest.mark.asyncio
    async def test_second_page(self, unit_env):
        """Page 2 of size 10 over 25 posts is the 11th-20th newest."""
        # Arrange
        use_case = await unit_env.get(GetPostsPageUseCase)
        post_repo = await unit_env.get(PostRepository)
        await _seed(post_repo, 25)

        # Act
        result = await use_case.execute(GetPostsPageRequest(page=2, page_size=10))

        # Assert
        assert result.total == 25
        assert result.page == 2
        assert result.page_size == 10
        assert [p.id for p in result.items] == list(range(15, 5, -1))

    @pytest.mark.asyncio
    async def test_last_partial_page(self, unit_env):
        """The last page holds the remainder."""
        use_case = await unit_env.get(GetPostsPageUseCase)
        post_repo = await unit_env.get(PostRepository)
        await _seed(post_repo, 25)

        result = await use_case.execute(GetPostsPageRequest(page=3, page_size=10))

        assert [p.id for p in result.items] == [5, 4, 3, 2, 1]

    @pytest.mark.asyncio
    async def test_page_beyond_end_is_empty(self, unit_env):
        """Pages past the end are empty but still report the total."""
        use_case = await unit_env.get(GetPostsPageUseCase)
        post_repo = await unit_env.get(PostRepository)
        await _seed(post_repo, 3)

        result = await use_case.execute(GetPostsPageRequest(page=5))

        assert result.items == []
        assert result.total == 3

    @pytest.mark.asyncio
    async def test_huge_page_is_capped(self, unit_env):
        """Absurd page numbers are capped so the offset stays in range."""
        use_case = await unit_env.get(GetPostsPageUseCase)
        post_repo = await unit_env.get(PostRepository)
        await _seed(post_repo, 3)

        result = await use_case.execute(
            GetPostsPageRequest(page=1e18, page_size=MAX_PAGE_SIZE)
        )

        assert result.page == MAX_PAGE
        assert result.items == []
        assert result.total == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "page,page_size,expected_page,expected_size",
        [
            (None, None, 1, 10),
            (0, 0, 1, 1),
            (-4, 500, 1, 100),
            (2.7, 5.9, 2, 5),
            (float("nan"), float("inf"), 1, 10),
        ],
    )
    async def test_paging_is_clamped(
        self, unit_env, page, page_size, expected_page, expected_size
    ):
        """Page is at least 1 and page size stays within [1, 100]."""
        use_case = await unit_env.get(GetPostsPageUseCase)

        result = await use_case.execute(
            GetPostsPageRequest(page=page, page_size=page_size)
        )

        assert result.page == expected_page
        assert result.page_size == expected_size

    @pytest.mark.asyncio
    async def test_filters_combine(self, unit_env):
        """Sentiment, stock code and position filters all apply."""
        # Arrange
        use_case = await unit_env.get(GetPostsPageUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.add(
            make_post(1, stock_code="005930", sentiment=Sentiment.BULLISH,
                      position_type=PositionType.BUY)
        )
        await post_repo.add(
            make_post(2, stock_code="005930", sentiment=Sentiment.BEARISH,
                      position_type=PositionType.SELL)
        )
        await post_repo.add(
            make_post(3, stock_code="035720", sentiment=Sentiment.BULLISH,
                      position_type=PositionType.BUY)
        )

        # Act
        result = await use_case.execute(
            GetPostsPageRequest(
                sentiment=Sentiment.BULLISH,
                stock_code=" 005930 ",
                position_type=PositionType.BUY,
            )
        )

        # Assert
        assert result.total == 1
        assert [p.id for p in result.items] == [1]

    @pytest.mark.asyncio
    async def test_blank_stock_code_is_ignored(self, unit_env):
        """A blank stock code does not filter anything out."""
        use_case = await unit_env.get(GetPostsPageUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.add(make_post(1, stock_code="005930"))
        await post_repo.add(make_post(2))

        result = await use_case.execute(GetPostsPageRequest(stock_code="   "))

        assert result.total == 2
