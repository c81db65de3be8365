from blogapp.dependencies.dependencies import (
    AuthServiceDep,
    BlogQueryListDep,
    BlogRepoDep,
    BlogServiceDep,
    PostQueryListDep,
    PostRepoDep,
    PostServiceDep,
    SessionDep,
    UserDBDep,
    UserQueryListDep,
    UserRepoDep,
    UserServiceDep,
    get_current_user,
)

__all__ = [
    "AuthServiceDep",
    "BlogQueryListDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "PostQueryListDep",
    "PostRepoDep",
    "PostServiceDep",
    "SessionDep",
    "UserDBDep",
    "UserQueryListDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_current_user",
]
