"""Update post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from stockboard.domain.model import Post
from stockboard.domain.service import PostService
from stockboard.domain.value import PositionType, PostId, Sentiment


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only the fields that are explicitly set are changed.
    """

    post_id: int
    title: str | None = None
    content: str | None = None
    author: str | None = None
    stock_code: str | None = None
    stock_name: str | None = None
    sentiment: Sentiment | None = None
    position_type: PositionType | None = None
    entry_price: float | None = None
    target_price: float | None = None

    def supplied_changes(self) -> dict:
        """Fields set by the caller, excluding the target ID."""
        return self.model_dump(exclude_unset=True, exclude={"post_id"})


class UpdatePostUseCase:
    """Use case for partially updating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> Optional[Post]:
        """Execute update post flow.

        Args:
            request: Update post request with post ID and changed fields

        Returns:
            Updated post, or None if the post doesn't exist

        Raises:
            ValidationError: If the ID is invalid, nothing is supplied, or a
                supplied field is invalid
        """
        changes = self.post_service.build_changes(
            request.post_id, **request.supplied_changes()
        )

        with logfire.span("update_post.execute", post_id=request.post_id):
            return await self.post_service.update_post(
                PostId(request.post_id), changes
            )
