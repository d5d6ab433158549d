"""Unit tests for GetTrendingStocksUseCase."""

from datetime import timedelta

import pytest

from stockboard.application.usecase.stock import (
    GetTrendingStocksRequest,
    GetTrendingStocksUseCase,
)
from stockboard.domain.repository import PostRepository
from stockboard.domain.value import Sentiment
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetTrendingStocksUseCase:
    """Tests for GetTrendingStocksUseCase."""

    @pytest.mark.asyncio
    async def test_groups_and_counts_recent_posts(self, unit_env):
        """Posts in the window are grouped per stock with sentiment counts."""
        # Arrange
        use_case = await unit_env.get(GetTrendingStocksUseCase)
        post_repo = await unit_env.get(PostRepository)
        samsung = {"stock_code": "005930", "stock_name": "삼성전자"}
        await post_repo.add(make_post(1, **samsung, sentiment=Sentiment.BULLISH,
                                      target_price=90000, age=timedelta(days=1)))
        await post_repo.add(make_post(2, **samsung, sentiment=Sentiment.BULLISH,
                                      target_price=100000, age=timedelta(days=2)))
        await post_repo.add(make_post(3, **samsung, sentiment=Sentiment.BEARISH,
                                      age=timedelta(days=3)))
        await post_repo.add(make_post(4, stock_code="035720", stock_name="카카오",
                                      age=timedelta(hours=2)))
        # Outside the 7 day window
        await post_repo.add(make_post(5, stock_code="035720", stock_name="카카오",
                                      age=timedelta(days=10)))
        # No stock code
        await post_repo.add(make_post(6))

        # Act
        trends = await use_case.execute(GetTrendingStocksRequest())

        # Assert
        assert [t.stock_code for t in trends] == ["005930", "035720"]

        top = trends[0]
        assert top.stock_name == "삼성전자"
        assert top.post_count == 3
        assert top.bullish_count == 2
        assert top.neutral_count == 0
        assert top.bearish_count == 1
        assert top.avg_target_price == 95000
        assert top.bullish_count + top.neutral_count + top.bearish_count == top.post_count

        kakao = trends[1]
        assert kakao.post_count == 1
        assert kakao.neutral_count == 1
        assert kakao.avg_target_price is None

    @pytest.mark.asyncio
    async def test_ties_favor_most_recent(self, unit_env):
        """Equal post counts are ordered by latest post."""
        use_case = await unit_env.get(GetTrendingStocksUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.add(make_post(1, stock_code="OLD", age=timedelta(days=2)))
        await post_repo.add(make_post(2, stock_code="NEW", age=timedelta(hours=1)))

        trends = await use_case.execute(GetTrendingStocksRequest())

        assert [t.stock_code for t in trends] == ["NEW", "OLD"]

    @pytest.mark.asyncio
    async def test_limit_caps_results(self, unit_env):
        """No more than limit summaries are returned."""
        use_case = await unit_env.get(GetTrendingStocksUseCase)
        post_repo = await unit_env.get(PostRepository)
        for post_id in range(1, 8):
            await post_repo.add(make_post(post_id, stock_code=f"S{post_id}"))

        assert len(await use_case.execute(GetTrendingStocksRequest())) == 5
        assert len(await use_case.execute(GetTrendingStocksRequest(limit=2))) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "limit,days,expected",
        [
            (None, None, (5, 7)),
            (0, 0, (1, 1)),
            (50, 365, (20, 90)),
            (3.9, 14.2, (3, 14)),
            (float("nan"), float("-inf"), (5, 7)),
        ],
    )
    async def test_window_is_clamped(self, unit_env, limit, days, expected):
        """Limit stays in [1, 20] and days in [1, 90]."""
        use_case = await unit_env.get(GetTrendingStocksUseCase)

        window = use_case.resolve_window(
            GetTrendingStocksRequest(limit=limit, days=days)
        )

        assert window == expected
