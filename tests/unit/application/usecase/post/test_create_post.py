"""Unit tests for CreatePostUseCase."""

import pytest

from stockboard.application.usecase.post import CreatePostRequest, CreatePostUseCase
from stockboard.domain.error import ValidationError
from stockboard.domain.repository import PostRepository, UnitOfWork
from stockboard.domain.value import PositionType, Sentiment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_success(self, unit_env):
        """A valid request stores a post with ID, zero counters and timestamps."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        request = CreatePostRequest(
            title="SK hynix HBM demand",
            content="HBM orders are booked through next year.",
            author="chipwatcher",
            stock_code="000660",
            stock_name="SK하이닉스",
            sentiment=Sentiment.BULLISH,
            position_type=PositionType.BUY,
            entry_price=180000,
            target_price=230000,
        )

        # Act
        post = await use_case.execute(request)

        # Assert
        assert post.id == 1
        assert post.stock_code == "000660"
        assert post.sentiment == Sentiment.BULLISH
        assert post.position_type == PositionType.BUY
        assert post.entry_price == 180000
        assert post.view_count == 0
        assert post.like_count == 0
        assert post.created_at == post.updated_at

        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_ids_are_sequential(self, unit_env):
        """Each new post gets the next ID."""
        use_case = await unit_env.get(CreatePostUseCase)

        first = await use_case.execute(
            CreatePostRequest(title="One", content="c", author="a")
        )
        second = await use_case.execute(
            CreatePostRequest(title="Two", content="c", author="a")
        )

        assert second.id == first.id + 1

    @pytest.mark.asyncio
    async def test_create_post_defaults(self, unit_env):
        """Sentiment and position default to neutral and hold."""
        use_case = await unit_env.get(CreatePostUseCase)

        post = await use_case.execute(
            CreatePostRequest(title="Title", content="Content", author="a")
        )

        assert post.sentiment == Sentiment.NEUTRAL
        assert post.position_type == PositionType.HOLD
        assert post.stock_code is None

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, unit_env):
        """Whitespace-only title raises ValidationError and stores nothing."""
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        unit_of_work = await unit_env.get(UnitOfWork)

        with pytest.raises(ValidationError, match="Title is required"):
            await use_case.execute(
                CreatePostRequest(title="   ", content="Content", author="a")
            )

        assert await post_repo.find_all() == []
        assert unit_of_work.commits == 0

    @pytest.mark.asyncio
    async def test_negative_target_price_rejected(self, unit_env):
        """Negative prices are rejected."""
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(
                    title="Title", content="Content", author="a", target_price=-5
                )
            )
