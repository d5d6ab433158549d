"""Post use cases."""

from .change_like import ChangePostLikeRequest, ChangePostLikeUseCase
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostByIdUseCase, GetPostRequest
from .list_posts import (
    GetAllPostsUseCase,
    GetPostsPageRequest,
    GetPostsPageResponse,
    GetPostsPageUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "ChangePostLikeRequest",
    "ChangePostLikeUseCase",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetAllPostsUseCase",
    "GetPostByIdUseCase",
    "GetPostRequest",
    "GetPostsPageRequest",
    "GetPostsPageResponse",
    "GetPostsPageUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
