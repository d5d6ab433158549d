"""Domain layer DI providers."""

from dishka import Scope, provide

from stockboard.domain.repository import PostRepository, UnitOfWork
from stockboard.domain.service import PostService
from stockboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_post_service(
        self, post_repository: PostRepository, unit_of_work: UnitOfWork
    ) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository, unit_of_work=unit_of_work)
