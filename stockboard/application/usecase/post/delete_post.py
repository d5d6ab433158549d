"""Delete post use case."""

from pydantic import BaseModel

from stockboard.domain.error import NotFoundError, ValidationError
from stockboard.domain.service import PostService
from stockboard.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: int


class DeletePostUseCase:
    """Use case for deleting a post (hard delete)."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> bool:
        """Execute delete post flow.

        Args:
            request: Delete post request

        Returns:
            True if the post was removed

        Raises:
            ValidationError: If the post ID is not positive
            NotFoundError: If the post doesn't exist
        """
        if request.post_id <= 0:
            raise ValidationError("Invalid post ID")

        post_id = PostId(request.post_id)

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(request.post_id))

        return await self.post_service.delete_post(post_id)
