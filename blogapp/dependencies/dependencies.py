"""Application dependencies: authentication, repositories, services and list queries."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_401_UNAUTHORIZED

from blogapp.db import get_session
from blogapp.managers.token_manager import decode_access_token
from blogapp.models import UserDB
from blogapp.repositories import BlogRepository, PostRepository, UserRepository
from blogapp.schemas.query import BlogSortField, ListQuery, PostSortField, UserSortField
from blogapp.services import AuthService, BlogService, PostService, UserService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: SessionDep,
) -> UserDB:
    """
    Get current authenticated user using user_id from token claims.

    Parameters
    ----------
    token : str
        Bearer token.
    session : AsyncSession
        Database session.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    HTTPException
        401 if the token is invalid, the user no longer exists or is banned.
    """
    token_data = decode_access_token(token)
    if not token_data or not token_data.user_id:
        raise _unauthorized("Could not validate credentials")

    user = await UserRepository(session).get_by_id(token_data.user_id)
    if not user:
        raise _unauthorized("User not found")
    if user.is_banned:
        raise _unauthorized("User is banned")

    return user


UserDBDep = Annotated[UserDB, Depends(get_current_user)]


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


def get_post_repository(session: SessionDep) -> PostRepository:
    return PostRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
PostRepoDep = Annotated[PostRepository, Depends(get_post_repository)]


def get_auth_service(repo: UserRepoDep) -> AuthService:
    return AuthService(repo)


def get_user_service(repo: UserRepoDep) -> UserService:
    return UserService(repo)


def get_blog_service(repo: BlogRepoDep) -> BlogService:
    return BlogService(repo)


def get_post_service(
    repo: PostRepoDep,
    blog_service: Annotated[BlogService, Depends(get_blog_service)],
) -> PostService:
    return PostService(repo, blog_service)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]

# Raw strings so malformed values fall back to defaults instead of failing
PageNumberQuery = Annotated[str | None, Query(alias="pageNumber", description="1-based page")]
PageSizeQuery = Annotated[str | None, Query(alias="pageSize", description="Items per page")]
SortDirectionQuery = Annotated[
    str | None,
    Query(alias="sortDirection", description="asc or desc (default desc)"),
]
SearchNameQuery = Annotated[
    str | None,
    Query(alias="searchNameTerm", description="Case-insensitive name substring"),
]


def get_blog_list_query(
    page_number: PageNumberQuery = None,
    page_size: PageSizeQuery = None,
    sort_by: Annotated[str | None, Query(alias="sortBy", description="Blog sort field")] = None,
    sort_direction: SortDirectionQuery = None,
    search_name_term: SearchNameQuery = None,
    ban_status: Annotated[
        str | None,
        Query(alias="banStatus", description="all, banned or notBanned (admin only)"),
    ] = None,
) -> ListQuery:
    """
    Dependency to construct a blog ``ListQuery`` from query parameters.

    Returns
    -------
    ListQuery
        Normalized query descriptor.
    """
    return ListQuery.from_raw(
        BlogSortField,
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
        search={"name": search_name_term},
        ban_status=ban_status,
    )


def get_post_list_query(
    page_number: PageNumberQuery = None,
    page_size: PageSizeQuery = None,
    sort_by: Annotated[str | None, Query(alias="sortBy", description="Post sort field")] = None,
    sort_direction: SortDirectionQuery = None,
) -> ListQuery:
    return ListQuery.from_raw(
        PostSortField,
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )


def get_user_list_query(
    page_number: PageNumberQuery = None,
    page_size: PageSizeQuery = None,
    sort_by: Annotated[str | None, Query(alias="sortBy", description="User sort field")] = None,
    sort_direction: SortDirectionQuery = None,
    search_login_term: Annotated[
        str | None,
        Query(alias="searchLoginTerm", description="Case-insensitive login substring"),
    ] = None,
    search_email_term: Annotated[
        str | None,
        Query(alias="searchEmailTerm", description="Case-insensitive email substring"),
    ] = None,
    ban_status: Annotated[
        str | None,
        Query(alias="banStatus", description="all, banned or notBanned"),
    ] = None,
) -> ListQuery:
    """
    Dependency to construct a user ``ListQuery``.

    Login and email terms are OR-combined by the query engine.
    """
    return ListQuery.from_raw(
        UserSortField,
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_direction=sort_direction,
        search={"login": search_login_term, "email": search_email_term},
        ban_status=ban_status,
    )


BlogQueryListDep = Annotated[ListQuery, Depends(get_blog_list_query)]
PostQueryListDep = Annotated[ListQuery, Depends(get_post_list_query)]
UserQueryListDep = Annotated[ListQuery, Depends(get_user_list_query)]
