from blogapp.schemas.auth import LoginInput, MeView, Token, TokenData
from blogapp.schemas.ban import BanBlogInput, BanUserInput
from blogapp.schemas.blog import AdminBlogView, BlogBanInfo, BlogInput, BlogOwnerInfo, BlogView
from blogapp.schemas.post import PostInput, PostView
from blogapp.schemas.query import (
    BanStatus,
    BlogSortField,
    ListQuery,
    Page,
    PostSortField,
    SortDirection,
    UserSortField,
)
from blogapp.schemas.user import UserBanInfo, UserCreate, UserView

__all__ = [
    "AdminBlogView",
    "BanBlogInput",
    "BanStatus",
    "BanUserInput",
    "BlogBanInfo",
    "BlogInput",
    "BlogOwnerInfo",
    "BlogSortField",
    "BlogView",
    "ListQuery",
    "LoginInput",
    "MeView",
    "Page",
    "PostInput",
    "PostSortField",
    "PostView",
    "SortDirection",
    "Token",
    "TokenData",
    "UserBanInfo",
    "UserCreate",
    "UserSortField",
    "UserView",
]
