"""Get post by ID use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from stockboard.domain.error import ValidationError
from stockboard.domain.model import Post
from stockboard.domain.repository import PostRepository, UnitOfWork
from stockboard.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: int
    record_view: bool = True  # Count this read as a view


class GetPostByIdUseCase:
    """Use case for retrieving a single post.

    By default a read counts as a view; callers that only need the data
    (e.g. the edit form) pass record_view=False.
    """

    def __init__(
        self, post_repository: PostRepository, unit_of_work: UnitOfWork
    ) -> None:
        """Initialize get post use case.

        Args:
            post_repository: Post repository
            unit_of_work: Commits the view counter
        """
        self.post_repository = post_repository
        self.unit_of_work = unit_of_work

    async def execute(self, request: GetPostRequest) -> Optional[Post]:
        """Execute get post flow.

        Args:
            request: Get post request with post ID and view flag

        Returns:
            Post if found, None otherwise

        Raises:
            ValidationError: If the post ID is not positive
        """
        if request.post_id <= 0:
            raise ValidationError("Invalid post ID")

        post_id = PostId(request.post_id)

        with logfire.span(
            "get_post.execute", post_id=post_id, record_view=request.record_view
        ):
            if not request.record_view:
                return await self.post_repository.find_by_id(post_id)

            post = await self.post_repository.increment_view_count(post_id)
            if post is not None:
                await self.unit_of_work.commit()
            return post
