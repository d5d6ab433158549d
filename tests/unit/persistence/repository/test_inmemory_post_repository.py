"""Unit tests for InMemoryPostRepository."""

from datetime import timedelta

import pytest

from stockboard.domain.model import NewPost, PostChanges
from stockboard.domain.repository.post import PostFilters
from stockboard.domain.value import LikeDelta, PostId, Sentiment
from stockboard.persistence.repository.inmemory.post import InMemoryPostRepository
from tests.conftest import make_post


class TestInMemoryPostRepository:
    """Unit tests for the in-memory double of PostRepository."""

    @pytest.mark.asyncio
    async def test_create_assigns_sequential_ids(self):
        """IDs start at 1 and skip IDs already seeded."""
        repo = InMemoryPostRepository()
        await repo.add(make_post(2))

        first = await repo.create(NewPost(title="A", content="c", author="a"))
        second = await repo.create(NewPost(title="B", content="c", author="a"))

        assert first.id == 1
        assert second.id == 3

    @pytest.mark.asyncio
    async def test_find_page_orders_by_created_then_id(self):
        """Posts created at the same instant fall back to ID order."""
        repo = InMemoryPostRepository()
        same = make_post(1)
        await repo.add(same)
        await repo.add(same.model_copy(update={"id": PostId(2)}))
        await repo.add(make_post(3, age=timedelta(days=1)))

        page = await repo.find_page(offset=0, limit=10)

        assert [p.id for p in page.items] == [2, 1, 3]
        assert page.total == 3

    @pytest.mark.asyncio
    async def test_find_page_filters(self):
        """Filters narrow both the items and the total."""
        repo = InMemoryPostRepository()
        await repo.add(make_post(1, sentiment=Sentiment.BULLISH))
        await repo.add(make_post(2, sentiment=Sentiment.BEARISH))

        page = await repo.find_page(
            offset=0, limit=10, filters=PostFilters(sentiment=Sentiment.BEARISH)
        )

        assert [p.id for p in page.items] == [2]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_update_applies_only_set_fields(self):
        """Explicit None clears; unset fields are untouched."""
        repo = InMemoryPostRepository()
        await repo.add(make_post(1, title="Old", stock_code="005930", target_price=1.0))

        updated = await repo.update(PostId(1), PostChanges(target_price=None))

        assert updated.target_price is None
        assert updated.title == "Old"
        assert updated.stock_code == "005930"

    @pytest.mark.asyncio
    async def test_counters(self):
        """Views add one; likes are clamped at zero."""
        repo = InMemoryPostRepository()
        await repo.add(make_post(1))

        viewed = await repo.increment_view_count(PostId(1))
        unliked = await repo.update_like_count(PostId(1), LikeDelta.UNLIKE)

        assert viewed.view_count == 1
        assert unliked.like_count == 0

    @pytest.mark.asyncio
    async def test_missing_post(self):
        """Operations on unknown IDs report absence."""
        repo = InMemoryPostRepository()

        assert await repo.find_by_id(PostId(1)) is None
        assert await repo.update(PostId(1), PostChanges(title="x")) is None
        assert await repo.increment_view_count(PostId(1)) is None
        assert await repo.update_like_count(PostId(1), LikeDelta.LIKE) is None
        assert await repo.delete(PostId(1)) is False

    @pytest.mark.asyncio
    async def test_trending_groups_by_code_and_name(self):
        """The same code under two names forms two groups."""
        repo = InMemoryPostRepository()
        await repo.add(make_post(1, stock_code="005930", stock_name="삼성전자"))
        await repo.add(make_post(2, stock_code="005930", stock_name="Samsung"))

        trends = await repo.find_trending_stocks(limit=5, days=7)

        assert sorted(t.stock_name for t in trends) == ["Samsung", "삼성전자"]
