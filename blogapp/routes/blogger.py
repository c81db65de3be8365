"""
Blogger routes.

Authenticated users manage their own blogs and the posts inside them.
Touching a blog owned by someone else answers ``403``; unknown blogs or
posts answer ``404``.
"""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from blogapp.decorators import timed
from blogapp.dependencies import (
    BlogQueryListDep,
    BlogServiceDep,
    PostQueryListDep,
    PostServiceDep,
    UserDBDep,
)
from blogapp.errors import RecordNotFoundError
from blogapp.managers import limiter
from blogapp.routes.responses import (
    BAD_REQUEST,
    FORBIDDEN,
    NO_CONTENT,
    NOT_FOUND,
    RATE_LIMITED,
    READ_LIMIT,
    UNAUTHORIZED,
    WRITE_LIMIT,
)
from blogapp.schemas import BlogInput, BlogView, Page, PostInput, PostView

router = APIRouter(prefix="/blogger/blogs", tags=["Blogger"])


def _blog_not_found(blog_id: UUID) -> RecordNotFoundError:
    return RecordNotFoundError(f"Blog with ID {blog_id} not found")


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=Page[BlogView],
    summary="List own blogs",
    responses={**UNAUTHORIZED, **RATE_LIMITED},
    operation_id="blogger_blogs_list",
)
@timed("/blogger/blogs")
@limiter.limit(READ_LIMIT)
async def get_own_blogs(
    request: Request,
    response: Response,
    query: BlogQueryListDep,
    service: BlogServiceDep,
    current_user: UserDBDep,
) -> Page[BlogView]:
    return await service.list_for_owner(current_user.id, query)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogView,
    status_code=HTTP_201_CREATED,
    summary="Create blog",
    responses={**BAD_REQUEST, **UNAUTHORIZED, **RATE_LIMITED},
    operation_id="blogger_blogs_create",
)
@timed("/blogger/blogs/create")
@limiter.limit(WRITE_LIMIT)
async def create_blog(
    request: Request,
    response: Response,
    blog: BlogInput,
    service: BlogServiceDep,
    current_user: UserDBDep,
) -> BlogView:
    return await service.create(current_user, blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Update blog",
    responses={**NO_CONTENT, **BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogger_blogs_update",
)
@timed("/blogger/blogs/update")
@limiter.limit(WRITE_LIMIT)
async def update_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    blog: BlogInput,
    service: BlogServiceDep,
    current_user: UserDBDep,
) -> None:
    if not await service.update(current_user.id, blog_id, blog):
        raise _blog_not_found(blog_id)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete an own blog together with all of its posts.",
    responses={**NO_CONTENT, **BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogger_blogs_delete",
)
@timed("/blogger/blogs/delete")
@limiter.limit(WRITE_LIMIT)
async def delete_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    service: BlogServiceDep,
    current_user: UserDBDep,
) -> None:
    if not await service.delete(current_user.id, blog_id):
        raise _blog_not_found(blog_id)


@router.get(
    "/{blog_id}/posts",
    response_class=ORJSONResponse,
    response_model=Page[PostView],
    summary="List posts of an own blog",
    description="Lists posts even while the blog is banned.",
    responses={**BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogger_posts_list",
)
@timed("/blogger/blogs/{blog_id}/posts")
@limiter.limit(READ_LIMIT)
async def get_own_blog_posts(
    request: Request,
    response: Response,
    blog_id: UUID,
    query: PostQueryListDep,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> Page[PostView]:
    page = await service.list_for_blog(blog_id, query, owner_id=current_user.id)
    if page is None:
        raise _blog_not_found(blog_id)
    return page


@router.post(
    "/{blog_id}/posts",
    response_class=ORJSONResponse,
    response_model=PostView,
    status_code=HTTP_201_CREATED,
    summary="Create post in an own blog",
    responses={**BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogger_posts_create",
)
@timed("/blogger/blogs/{blog_id}/posts/create")
@limiter.limit(WRITE_LIMIT)
async def create_post(
    request: Request,
    response: Response,
    blog_id: UUID,
    post: PostInput,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> PostView:
    created = await service.create(current_user.id, blog_id, post)
    if created is None:
        raise _blog_not_found(blog_id)
    return created


@router.put(
    "/{blog_id}/posts/{post_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Update post",
    responses={**NO_CONTENT, **BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogger_posts_update",
)
@timed("/blogger/blogs/{blog_id}/posts/update")
@limiter.limit(WRITE_LIMIT)
async def update_post(
    request: Request,
    response: Response,
    blog_id: UUID,
    post_id: UUID,
    post: PostInput,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> None:
    if not await service.update(current_user.id, blog_id, post_id, post):
        raise RecordNotFoundError(f"Post with ID {post_id} not found in blog {blog_id}")


@router.delete(
    "/{blog_id}/posts/{post_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete post",
    responses={**NO_CONTENT, **BAD_REQUEST, **UNAUTHORIZED, **FORBIDDEN, **NOT_FOUND, **RATE_LIMITED},
    operation_id="blogger_posts_delete",
)
@timed("/blogger/blogs/{blog_id}/posts/delete")
@limiter.limit(WRITE_LIMIT)
async def delete_post(
    request: Request,
    response: Response,
    blog_id: UUID,
    post_id: UUID,
    service: PostServiceDep,
    current_user: UserDBDep,
) -> None:
    if not await service.delete(current_user.id, blog_id, post_id):
        raise RecordNotFoundError(f"Post with ID {post_id} not found in blog {blog_id}")
