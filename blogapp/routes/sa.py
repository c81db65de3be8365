"""
Super-admin routes.

Every endpoint requires a bearer token of a user with the ``admin`` role.
Admin listings always expose ban state and can filter on it with
``banStatus``.
"""

from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from blogapp.auth import AdminUserDep
from blogapp.decorators import timed
from blogapp.dependencies import BlogQueryListDep, BlogServiceDep, UserQueryListDep, UserServiceDep
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
from blogapp.schemas import AdminBlogView, BanBlogInput, BanUserInput, Page, UserCreate, UserView

router = APIRouter(prefix="/sa", tags=["Super admin"])

ADMIN_ERRORS = {**UNAUTHORIZED, **FORBIDDEN, **RATE_LIMITED}


@router.get(
    "/users",
    response_class=ORJSONResponse,
    response_model=Page[UserView],
    summary="List users",
    description=(
        "Paginated users with ban info. `searchLoginTerm` and `searchEmailTerm` "
        "are OR-combined; `banStatus` is one of `all`, `banned`, `notBanned`."
    ),
    responses=ADMIN_ERRORS,
    operation_id="sa_users_list",
)
@timed("/sa/users")
@limiter.limit(READ_LIMIT)
async def get_users(
    request: Request,
    response: Response,
    query: UserQueryListDep,
    service: UserServiceDep,
    admin: AdminUserDep,
) -> Page[UserView]:
    return await service.list_for_admin(query)


@router.post(
    "/users",
    response_class=ORJSONResponse,
    response_model=UserView,
    status_code=HTTP_201_CREATED,
    summary="Create user",
    responses={**BAD_REQUEST, **ADMIN_ERRORS},
    operation_id="sa_users_create",
)
@timed("/sa/users/create")
@limiter.limit(WRITE_LIMIT)
async def create_user(
    request: Request,
    response: Response,
    user: UserCreate,
    service: UserServiceDep,
    admin: AdminUserDep,
) -> UserView:
    return await service.create(user)


@router.delete(
    "/users/{user_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete user",
    description="Delete a user together with their blogs and posts.",
    responses={**NO_CONTENT, **BAD_REQUEST, **NOT_FOUND, **ADMIN_ERRORS},
    operation_id="sa_users_delete",
)
@timed("/sa/users/delete")
@limiter.limit(WRITE_LIMIT)
async def delete_user(
    request: Request,
    response: Response,
    user_id: UUID,
    service: UserServiceDep,
    admin: AdminUserDep,
) -> None:
    if not await service.delete(user_id):
        raise RecordNotFoundError(f"User with ID {user_id} not found")


@router.put(
    "/users/{user_id}/ban",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Ban or unban user",
    description=(
        "`banReason` (at least 20 characters) is required when `isBanned` is true. "
        "Unbanning clears the ban date and reason."
    ),
    responses={**NO_CONTENT, **BAD_REQUEST, **NOT_FOUND, **ADMIN_ERRORS},
    operation_id="sa_users_ban",
)
@timed("/sa/users/ban")
@limiter.limit(WRITE_LIMIT)
async def ban_user(
    request: Request,
    response: Response,
    user_id: UUID,
    ban: BanUserInput,
    service: UserServiceDep,
    admin: AdminUserDep,
) -> None:
    if not await service.set_ban_status(user_id, ban):
        raise RecordNotFoundError(f"User with ID {user_id} not found")


@router.get(
    "/blogs",
    response_class=ORJSONResponse,
    response_model=Page[AdminBlogView],
    summary="List blogs with owner and ban info",
    responses=ADMIN_ERRORS,
    operation_id="sa_blogs_list",
)
@timed("/sa/blogs")
@limiter.limit(READ_LIMIT)
async def get_blogs(
    request: Request,
    response: Response,
    query: BlogQueryListDep,
    service: BlogServiceDep,
    admin: AdminUserDep,
) -> Page[AdminBlogView]:
    return await service.list_for_admin(query)


@router.put(
    "/blogs/{blog_id}/ban",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Ban or unban blog",
    responses={**NO_CONTENT, **BAD_REQUEST, **NOT_FOUND, **ADMIN_ERRORS},
    operation_id="sa_blogs_ban",
)
@timed("/sa/blogs/ban")
@limiter.limit(WRITE_LIMIT)
async def ban_blog(
    request: Request,
    response: Response,
    blog_id: UUID,
    ban: BanBlogInput,
    service: BlogServiceDep,
    admin: AdminUserDep,
) -> None:
    if not await service.set_ban_status(blog_id, ban):
        raise RecordNotFoundError(f"Blog with ID {blog_id} not found")
