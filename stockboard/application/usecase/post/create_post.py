"""Create post use case."""

import logfire
from pydantic import BaseModel

from stockboard.domain.model import Post
from stockboard.domain.service import PostService
from stockboard.domain.value import PositionType, Sentiment


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    author: str
    stock_code: str | None = None
    stock_name: str | None = None
    sentiment: Sentiment | None = None  # Defaults to neutral
    position_type: PositionType | None = None  # Defaults to hold
    entry_price: float | None = None
    target_price: float | None = None


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> Post:
        """Execute create post flow.

        Steps:
        1. Validate and normalize input (via PostService)
        2. Store the post (ID and timestamps come from storage)

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If a required field is blank or a price is negative
        """
        with logfire.span(
            "create_post.execute",
            title=request.title,
            author=request.author,
            stock_code=request.stock_code,
        ):
            new_post = self.post_service.build_new_post(
                title=request.title,
                content=request.content,
                author=request.author,
                stock_code=request.stock_code,
                stock_name=request.stock_name,
                sentiment=request.sentiment,
                position_type=request.position_type,
                entry_price=request.entry_price,
                target_price=request.target_price,
            )

            post = await self.post_service.create_post(new_post)

            logfire.info("Post created successfully", post_id=post.id)
            return post
