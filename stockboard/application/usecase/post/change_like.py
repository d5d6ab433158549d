"""Change post like count use case."""

from pydantic import BaseModel

from stockboard.domain.error import NotFoundError, ValidationError
from stockboard.domain.model import Post
from stockboard.domain.service import PostService
from stockboard.domain.value import LikeDelta, PostId


class ChangePostLikeRequest(BaseModel):
    """Like / unlike request."""

    post_id: int
    delta: int  # +1 to like, -1 to unlike


class ChangePostLikeUseCase:
    """Use case for liking or unliking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize change post like use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ChangePostLikeRequest) -> Post:
        """Execute like / unlike flow.

        Args:
            request: Post ID and delta

        Returns:
            Updated post (like count never below 0)

        Raises:
            ValidationError: If the ID is not positive or delta is not +1/-1
            NotFoundError: If the post doesn't exist
        """
        if request.post_id <= 0:
            raise ValidationError("Invalid post ID")

        if request.delta not in (LikeDelta.LIKE, LikeDelta.UNLIKE):
            raise ValidationError("Delta must be 1 or -1")

        updated = await self.post_service.change_like_count(
            PostId(request.post_id), LikeDelta(request.delta)
        )
        if updated is None:
            raise NotFoundError("Post", str(request.post_id))

        return updated
