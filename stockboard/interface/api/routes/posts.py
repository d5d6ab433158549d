"""Post routes."""

from enum import Enum
from typing import Optional, TypeVar

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from stockboard.application.usecase.post import (
    ChangePostLikeRequest,
    ChangePostLikeUseCase,
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetAllPostsUseCase,
    GetPostByIdUseCase,
    GetPostRequest,
    GetPostsPageRequest,
    GetPostsPageUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from stockboard.application.usecase.stock import (
    GetTrendingStocksRequest,
    GetTrendingStocksUseCase,
)
from stockboard.domain.error import NotFoundError, ValidationError
from stockboard.domain.value import LikeDelta, PositionType, Sentiment
from stockboard.interface.api.schemas import (
    ApiResponse,
    CreatePostAPIRequest,
    MessageResponse,
    PostResponse,
    PostsPageResponse,
    StockTrendResponse,
    UpdatePostAPIRequest,
)

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)

E = TypeVar("E", bound=Enum)

POST_NOT_FOUND = "Post not found"


def _parse_number(raw: Optional[str]) -> Optional[float]:
    """Parse a query value as a number, None when missing or unparsable."""
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def _parse_choice(enum_type: type[E], raw: Optional[str]) -> Optional[E]:
    """Whitelist a query value against an enum; unknown values are ignored."""
    if not raw:
        return None
    try:
        return enum_type(raw)
    except ValueError:
        return None


def _http_error(exc: Exception, action: str) -> HTTPException:
    """Translate a use case failure into an HTTP error."""
    if isinstance(exc, ValidationError):
        logfire.warn("Post request rejected", action=action, error=str(exc))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFoundError):
        logfire.warn("Post not found", action=action, error=str(exc))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

    logfire.error("Unexpected error handling post request", action=action, error=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )


@router.get(
    "",
    response_model=ApiResponse[list[PostResponse]],
    response_model_exclude_none=True,
)
async def list_posts(
    get_all_posts_use_case: FromDishka[GetAllPostsUseCase],
) -> ApiResponse[list[PostResponse]]:
    """List every post, newest first."""
    try:
        posts = await get_all_posts_use_case.execute()
    except Exception as e:
        raise _http_error(e, "list posts") from e

    return ApiResponse(data=[PostResponse.from_post(post) for post in posts])


@router.get(
    "/page",
    response_model=ApiResponse[PostsPageResponse],
    response_model_exclude_none=True,
)
async def get_posts_page(
    get_posts_page_use_case: FromDishka[GetPostsPageUseCase],
    page: Optional[str] = Query(default=None),
    page_size: Optional[str] = Query(default=None, alias="pageSize"),
    sentiment: Optional[str] = Query(default=None),
    position_type: Optional[str] = Query(default=None, alias="positionType"),
    stock_code: Optional[str] = Query(default=None, alias="stockCode"),
) -> ApiResponse[PostsPageResponse]:
    """Get one page of posts with optional filters.

    Query values are coerced leniently: unparsable numbers fall back to
    defaults and unknown sentiment / position values are ignored.

    Args:
        get_posts_page_use_case: Page use case from DI
        page: 1-based page number
        page_size: Items per page (max 100)
        sentiment: bullish, neutral or bearish
        position_type: buy, hold or sell
        stock_code: Exact stock code

    Returns:
        Page items with total count and the effective page / page size
    """
    try:
        result = await get_posts_page_use_case.execute(
            GetPostsPageRequest(
                page=_parse_number(page),
                page_size=_parse_number(page_size),
                sentiment=_parse_choice(Sentiment, sentiment),
                position_type=_parse_choice(PositionType, position_type),
                stock_code=stock_code,
            )
        )
    except Exception as e:
        raise _http_error(e, "get posts page") from e

    return ApiResponse(
        data=PostsPageResponse(
            items=[PostResponse.from_post(post) for post in result.items],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
        )
    )


@router.get(
    "/trending",
    response_model=ApiResponse[list[StockTrendResponse]],
    response_model_exclude_none=True,
)
async def get_trending_stocks(
    get_trending_stocks_use_case: FromDishka[GetTrendingStocksUseCase],
    limit: Optional[str] = Query(default=None),
    days: Optional[str] = Query(default=None),
) -> ApiResponse[list[StockTrendResponse]]:
    """Most discussed stocks over a recent window.

    Args:
        get_trending_stocks_use_case: Trending use case from DI
        limit: Number of stocks (1-20, default 5)
        days: Window in days (1-90, default 7)
    """
    try:
        summaries = await get_trending_stocks_use_case.execute(
            GetTrendingStocksRequest(
                limit=_parse_number(limit), days=_parse_number(days)
            )
        )
    except Exception as e:
        raise _http_error(e, "get trending stocks") from e

    return ApiResponse(
        data=[StockTrendResponse.from_summary(summary) for summary in summaries]
    )


@router.get(
    "/{post_id}",
    response_model=ApiResponse[PostResponse],
    response_model_exclude_none=True,
)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostByIdUseCase],
    record_view: Optional[str] = Query(default=None, alias="recordView"),
) -> ApiResponse[PostResponse]:
    """Get a single post.

    Every read counts as a view unless ``recordView=false`` is passed (the
    edit form loads posts this way).

    Args:
        post_id: Post ID
        get_post_use_case: Get post use case from DI
        record_view: "false" to skip the view counter

    Raises:
        HTTPException: 400 for an invalid ID, 404 if the post doesn't exist
    """
    try:
        post = await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, record_view=record_view != "false")
        )
    except Exception as e:
        raise _http_error(e, "get post") from e

    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)

    return ApiResponse(data=PostResponse.from_post(post))


@router.post(
    "",
    response_model=ApiResponse[PostResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> ApiResponse[PostResponse]:
    """Create a new post.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI

    Returns:
        Created post with its ID and timestamps

    Raises:
        HTTPException: 400 if validation fails
    """
    try:
        post = await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump())
        )
    except Exception as e:
        raise _http_error(e, "create post") from e

    return ApiResponse(data=PostResponse.from_post(post))


@router.put(
    "/{post_id}",
    response_model=ApiResponse[PostResponse],
    response_model_exclude_none=True,
)
async def update_post(
    post_id: int,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> ApiResponse[PostResponse]:
    """Partially update a post.

    Only the fields present in the body are changed; an empty body is
    rejected.

    Raises:
        HTTPException: 400 if nothing valid to update, 404 if missing
    """
    try:
        post = await update_post_use_case.execute(
            UpdatePostRequest(post_id=post_id, **request.model_dump(exclude_unset=True))
        )
    except Exception as e:
        raise _http_error(e, "update post") from e

    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)

    return ApiResponse(data=PostResponse.from_post(post))


async def _change_like(
    use_case: ChangePostLikeUseCase, post_id: int, delta: LikeDelta
) -> ApiResponse[PostResponse]:
    try:
        post = await use_case.execute(
            ChangePostLikeRequest(post_id=post_id, delta=int(delta))
        )
    except Exception as e:
        raise _http_error(e, "change like") from e

    return ApiResponse(data=PostResponse.from_post(post))


@router.post(
    "/{post_id}/like",
    response_model=ApiResponse[PostResponse],
    response_model_exclude_none=True,
)
async def like_post(
    post_id: int,
    change_like_use_case: FromDishka[ChangePostLikeUseCase],
) -> ApiResponse[PostResponse]:
    """Add one like."""
    return await _change_like(change_like_use_case, post_id, LikeDelta.LIKE)


@router.delete(
    "/{post_id}/like",
    response_model=ApiResponse[PostResponse],
    response_model_exclude_none=True,
)
async def unlike_post(
    post_id: int,
    change_like_use_case: FromDishka[ChangePostLikeUseCase],
) -> ApiResponse[PostResponse]:
    """Remove one like (never below zero)."""
    return await _change_like(change_like_use_case, post_id, LikeDelta.UNLIKE)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> MessageResponse:
    """Hard delete a post.

    Raises:
        HTTPException: 404 if the post doesn't exist, 500 if the delete
            affected nothing
    """
    try:
        deleted = await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))
    except Exception as e:
        raise _http_error(e, "delete post") from e

    if not deleted:
        logfire.error("Post delete affected no rows", post_id=post_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )

    return MessageResponse(message="Post deleted successfully")
