"""Domain services."""

from .base import Service
from .post_service import PostService

__all__ = [
    "PostService",
    "Service",
]
