"""Post domain service."""

import math
from enum import Enum
from typing import Any

import logfire

from stockboard.domain.error import ValidationError
from stockboard.domain.model import NewPost, Post, PostChanges
from stockboard.domain.repository import PostRepository, UnitOfWork
from stockboard.domain.value import LikeDelta, PositionType, PostId, Sentiment

from .base import Service

TITLE_MAX_LENGTH = 200
AUTHOR_MAX_LENGTH = 100
STOCK_CODE_MAX_LENGTH = 20
STOCK_NAME_MAX_LENGTH = 100

# Labels used in validation messages
_FIELD_LABELS = {
    "title": "Title",
    "content": "Content",
    "author": "Author",
    "stock_code": "Stock code",
    "stock_name": "Stock name",
    "entry_price": "Entry price",
    "target_price": "Target price",
}

_MAX_LENGTHS = {
    "title": TITLE_MAX_LENGTH,
    "author": AUTHOR_MAX_LENGTH,
    "stock_code": STOCK_CODE_MAX_LENGTH,
    "stock_name": STOCK_NAME_MAX_LENGTH,
}

_REQUIRED_TEXT = ("title", "content", "author")
_OPTIONAL_TEXT = ("stock_code", "stock_name")
_PRICES = ("entry_price", "target_price")


class PostService(Service):
    """Domain service for post operations.

    Owns the acceptance rules for new posts and partial updates, and wraps
    repository writes with tracing. Every write is committed before it
    returns, so a failed commit surfaces to the caller.
    """

    def __init__(
        self, post_repository: PostRepository, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            unit_of_work: Transaction boundary shared with the repository
        """
        self.post_repository = post_repository
        self.unit_of_work = unit_of_work

    def build_new_post(
        self,
        title: str | None,
        content: str | None,
        author: str | None,
        stock_code: str | None = None,
        stock_name: str | None = None,
        sentiment: Sentiment | None = None,
        position_type: PositionType | None = None,
        entry_price: float | None = None,
        target_price: float | None = None,
    ) -> NewPost:
        """Validate and normalize input for a new post.

        - title, content and author are trimmed and must not be empty
        - blank stock code / stock name become None
        - prices must be >= 0 when present
        - sentiment defaults to neutral, position to hold

        Raises:
            ValidationError: If any rule is violated
        """
        return NewPost(
            title=self._required_text("title", title),
            content=self._required_text("content", content),
            author=self._required_text("author", author),
            stock_code=self._optional_text("stock_code", stock_code),
            stock_name=self._optional_text("stock_name", stock_name),
            sentiment=sentiment or Sentiment.NEUTRAL,
            position_type=position_type or PositionType.HOLD,
            entry_price=self._price("entry_price", entry_price),
            target_price=self._price("target_price", target_price),
        )

    def build_changes(self, post_id: int, **supplied: Any) -> PostChanges:
        """Validate and normalize a partial update.

        Each supplied field is normalized the same way as on create. A
        blank stock code / name or a None price clears the stored value.

        Args:
            post_id: Target post ID
            **supplied: Fields to change (only the ones present are applied)

        Raises:
            ValidationError: If the ID is invalid, nothing is supplied, or a
                field breaks a create rule
        """
        if post_id <= 0:
            raise ValidationError("Invalid post ID")
        if not supplied:
            raise ValidationError("No fields to update")

        normalized: dict[str, Any] = {}
        for field, value in supplied.items():
            if field in _REQUIRED_TEXT:
                normalized[field] = self._required_text(field, value)
            elif field in _OPTIONAL_TEXT:
                normalized[field] = self._optional_text(field, value)
            elif field in _PRICES:
                normalized[field] = self._price(field, value)
            elif field == "sentiment":
                normalized[field] = self._choice(Sentiment, "Sentiment", value)
            elif field == "position_type":
                normalized[field] = self._choice(PositionType, "Position type", value)
            else:
                raise ValidationError(f"Unknown field: {field}")

        return PostChanges(**normalized)

    async def create_post(self, new_post: NewPost) -> Post:
        """Store a new post.

        Args:
            new_post: Normalized post data

        Returns:
            Stored post with ID and timestamps
        """
        with logfire.span(
            "post_service.create_post",
            title=new_post.title,
            stock_code=new_post.stock_code,
        ):
            post = await self.post_repository.create(new_post)
            await self.unit_of_work.commit()
            logfire.info("Post created", post_id=post.id, author=post.author)
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID without touching its counters.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post | None:
        """Apply a partial update.

        Args:
            post_id: Post ID
            changes: Normalized changes

        Returns:
            Updated post, None if the post doesn't exist
        """
        with logfire.span(
            "post_service.update_post",
            post_id=post_id,
            fields=sorted(changes.model_fields_set),
        ):
            updated = await self.post_repository.update(post_id, changes)

            if updated:
                await self.unit_of_work.commit()
                logfire.info("Post updated", post_id=post_id)
            else:
                logfire.warn("Post not found for update", post_id=post_id)

            return updated

    async def delete_post(self, post_id: PostId) -> bool:
        """Hard delete a post.

        Args:
            post_id: Post ID

        Returns:
            True if a row was removed
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self.post_repository.delete(post_id)
            if deleted:
                await self.unit_of_work.commit()
            logfire.info("Post delete finished", post_id=post_id, deleted=deleted)
            return deleted

    async def change_like_count(
        self, post_id: PostId, delta: LikeDelta
    ) -> Post | None:
        """Atomically like or unlike a post (count never below 0).

        Args:
            post_id: Post ID
            delta: LikeDelta.LIKE or LikeDelta.UNLIKE

        Returns:
            Updated post, None if the post doesn't exist
        """
        with logfire.span(
            "post_service.change_like_count", post_id=post_id, delta=int(delta)
        ):
            updated = await self.post_repository.update_like_count(post_id, delta)

            if updated:
                await self.unit_of_work.commit()
                logfire.info(
                    "Post like count changed",
                    post_id=post_id,
                    like_count=updated.like_count,
                )
            else:
                logfire.warn("Post not found for like change", post_id=post_id)

            return updated

    @staticmethod
    def _required_text(field: str, value: str | None) -> str:
        label = _FIELD_LABELS[field]
        text = value.strip() if value is not None else ""
        if not text:
            raise ValidationError(f"{label} is required")
        PostService._check_length(field, text)
        return text

    @staticmethod
    def _optional_text(field: str, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            return None
        PostService._check_length(field, text)
        return text

    @staticmethod
    def _check_length(field: str, text: str) -> None:
        max_length = _MAX_LENGTHS.get(field)
        if max_length is not None and len(text) > max_length:
            raise ValidationError(
                f"{_FIELD_LABELS[field]} must be at most {max_length} characters"
            )

    @staticmethod
    def _choice(enum_type: type[Enum], label: str, value: Any) -> Any:
        if value is None:
            raise ValidationError(f"{label} cannot be empty")
        try:
            return enum_type(value)
        except ValueError:
            allowed = ", ".join(member.value for member in enum_type)
            raise ValidationError(f"{label} must be one of: {allowed}")

    @staticmethod
    def _price(field: str, value: float | None) -> float | None:
        if value is None:
            return None
        label = _FIELD_LABELS[field]
        if not math.isfinite(value):
            raise ValidationError(f"{label} must be a finite number")
        if value < 0:
            raise ValidationError(f"{label} must be 0 or greater")
        return float(value)
