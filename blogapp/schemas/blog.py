"""
Blog request and response models.

Request models validate the camelCase JSON bodies of the blogger
endpoints; view models are the projections returned to clients.
"""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from blogapp.configs.settings import (
    BLOG_DESCRIPTION_MAX_LENGTH,
    BLOG_NAME_MAX_LENGTH,
    BLOG_WEBSITE_MAX_LENGTH,
)
from blogapp.models import BlogDB
from blogapp.utils.helpers import to_iso

WEBSITE_URL_PATTERN = r"^https://([a-zA-Z0-9_-]+\.)+[a-zA-Z0-9_-]+(/[a-zA-Z0-9_-]+)*/?$"

BlogName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=BLOG_NAME_MAX_LENGTH),
]
BlogDescription = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=BLOG_DESCRIPTION_MAX_LENGTH,
    ),
]
WebsiteUrl = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        max_length=BLOG_WEBSITE_MAX_LENGTH,
        pattern=WEBSITE_URL_PATTERN,
    ),
]


class BlogInput(BaseModel):
    """Body of blog create and update requests."""

    model_config = ConfigDict(populate_by_name=True)

    name: BlogName = Field(..., description="Blog name", examples=["Travel notes"])
    description: BlogDescription = Field(
        ...,
        description="Blog description",
        examples=["Notes from the road"],
    )
    website_url: WebsiteUrl = Field(
        ...,
        alias="websiteUrl",
        description="Blog website (https only)",
        examples=["https://travel-notes.io/"],
    )


class BlogView(BaseModel):
    """Public projection of a blog."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    description: str
    website_url: str = Field(alias="websiteUrl")
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_db(cls, blog: BlogDB) -> "BlogView":
        return cls(
            id=blog.id,
            name=blog.name,
            description=blog.description,
            website_url=blog.website_url,
            created_at=to_iso(blog.created_at) or "",
        )


class BlogOwnerInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(alias="userId")
    user_login: str = Field(alias="userLogin")


class BlogBanInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_banned: bool = Field(alias="isBanned")
    ban_date: str | None = Field(default=None, alias="banDate")


class AdminBlogView(BlogView):
    """Blog projection for super admins, exposing owner and ban state."""

    blog_owner_info: BlogOwnerInfo = Field(alias="blogOwnerInfo")
    ban_info: BlogBanInfo = Field(alias="banInfo")

    @classmethod
    def from_row(cls, blog: BlogDB, owner_login: str) -> "AdminBlogView":
        base = BlogView.from_db(blog)
        return cls(
            **base.model_dump(),
            blog_owner_info=BlogOwnerInfo(user_id=blog.owner_id, user_login=owner_login),
            ban_info=BlogBanInfo(is_banned=blog.is_banned, ban_date=to_iso(blog.ban_date)),
        )
