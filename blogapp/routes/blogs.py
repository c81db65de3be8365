"""
Public blog routes.

Banned blogs, blogs of banned users and their posts are invisible here:
listings skip them and lookups answer ``404``.
"""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from blogapp.decorators import timed
from blogapp.dependencies import BlogQueryListDep, BlogServiceDep, PostQueryListDep, PostServiceDep
from blogapp.errors import RecordNotFoundError
from blogapp.managers import limiter
from blogapp.routes.responses import BAD_REQUEST, NOT_FOUND, RATE_LIMITED, READ_LIMIT
from blogapp.schemas import BlogView, Page, PostView

router = APIRouter(prefix="/blogs", tags=["Blogs"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=Page[BlogView],
    summary="List blogs",
    description=(
        "Paginated list of visible blogs. Supports `searchNameTerm`, `sortBy`, "
        "`sortDirection`, `pageNumber` and `pageSize`; invalid values fall back "
        "to their defaults."
    ),
    responses={**RATE_LIMITED},
    operation_id="blogs_list",
)
@timed("/blogs")
@limiter.limit(READ_LIMIT)
async def get_blogs(
    request: Request,
    response: Response,
    query: BlogQueryListDep,
    service: BlogServiceDep,
) -> Page[BlogView]:
    return await service.list_public(query)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogView,
    summary="Get blog by ID",
    responses={**BAD_REQUEST, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogs_get_by_id",
)
@timed("/blogs/{blog_id}")
@limiter.limit(READ_LIMIT)
async def get_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    service: BlogServiceDep,
) -> BlogView:
    blog = await service.get_public(blog_id)
    if blog is None:
        raise RecordNotFoundError(f"Blog with ID {blog_id} not found")
    return blog


@router.get(
    "/{blog_id}/posts",
    response_class=ORJSONResponse,
    response_model=Page[PostView],
    summary="List posts of a blog",
    description="Paginated posts of a visible blog; `404` if the blog is missing or hidden.",
    responses={**BAD_REQUEST, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogs_list_posts",
)
@timed("/blogs/{blog_id}/posts")
@limiter.limit(READ_LIMIT)
async def get_blog_posts(
    request: Request,
    response: Response,
    blog_id: UUID,
    query: PostQueryListDep,
    service: PostServiceDep,
) -> Page[PostView]:
    page = await service.list_for_blog(blog_id, query)
    if page is None:
        raise RecordNotFoundError(f"Blog with ID {blog_id} not found")
    return page
