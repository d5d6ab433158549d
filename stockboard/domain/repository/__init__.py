"""Repository interfaces for the stock board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from stockboard.domain.repository.post import PostFilters, PostPage, PostRepository
from stockboard.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "PostFilters",
    "PostPage",
    "PostRepository",
    "UnitOfWork",
]
