"""Application layer DI providers."""

from dishka import Scope, provide

from stockboard.application.usecase.post import (
    ChangePostLikeUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetAllPostsUseCase,
    GetPostByIdUseCase,
    GetPostsPageUseCase,
    UpdatePostUseCase,
)
from stockboard.application.usecase.stock import GetTrendingStocksUseCase
from stockboard.domain.repository import PostRepository, UnitOfWork
from stockboard.domain.service import PostService
from stockboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_by_id_use_case(
        self, post_repository: PostRepository, unit_of_work: UnitOfWork
    ) -> GetPostByIdUseCase:
        """Provide get post by ID use case."""
        return GetPostByIdUseCase(
            post_repository=post_repository, unit_of_work=unit_of_work
        )

    @provide(scope=Scope.REQUEST)
    def get_get_all_posts_use_case(
        self, post_repository: PostRepository
    ) -> GetAllPostsUseCase:
        """Provide get all posts use case."""
        return GetAllPostsUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_posts_page_use_case(
        self, post_repository: PostRepository
    ) -> GetPostsPageUseCase:
        """Provide paged list use case."""
        return GetPostsPageUseCase(post_repository=post_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_change_post_like_use_case(
        self, post_service: PostService
    ) -> ChangePostLikeUseCase:
        """Provide like / unlike use case."""
        return ChangePostLikeUseCase(post_service=post_service)

    # Stock use cases
    @provide(scope=Scope.REQUEST)
    def get_get_trending_stocks_use_case(
        self, post_repository: PostRepository
    ) -> GetTrendingStocksUseCase:
        """Provide trending stocks use case."""
        return GetTrendingStocksUseCase(post_repository=post_repository)
