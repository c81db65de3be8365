"""Public post routes."""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from blogapp.decorators import timed
from blogapp.dependencies import PostQueryListDep, PostServiceDep
from blogapp.errors import RecordNotFoundError
from blogapp.managers import limiter
from blogapp.routes.responses import BAD_REQUEST, NOT_FOUND, RATE_LIMITED, READ_LIMIT
from blogapp.schemas import Page, PostView

router = APIRouter(prefix="/posts", tags=["Posts"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=Page[PostView],
    summary="List posts",
    description="Paginated posts of every visible blog.",
    responses={**RATE_LIMITED},
    operation_id="posts_list",
)
@timed("/posts")
@limiter.limit(READ_LIMIT)
async def get_posts(
    request: Request,
    response: Response,
    query: PostQueryListDep,
    service: PostServiceDep,
) -> Page[PostView]:
    return await service.list_public(query)


@router.get(
    "/{post_id}",
    response_class=ORJSONResponse,
    response_model=PostView,
    summary="Get post by ID",
    responses={**BAD_REQUEST, **NOT_FOUND, **RATE_LIMITED},
    operation_id="posts_get_by_id",
)
@timed("/posts/{post_id}")
@limiter.limit(READ_LIMIT)
async def get_post(
    request: Request,
    response: Response,
    post_id: UUID,
    service: PostServiceDep,
) -> PostView:
    post = await service.get_public(post_id)
    if post is None:
        raise RecordNotFoundError(f"Post with ID {post_id} not found")
    return post
