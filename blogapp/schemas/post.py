"""Post request and response models."""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from blogapp.configs.settings import (
    POST_CONTENT_MAX_LENGTH,
    POST_SHORT_DESCRIPTION_MAX_LENGTH,
    POST_TITLE_MAX_LENGTH,
)
from blogapp.models import PostDB
from blogapp.utils.helpers import to_iso


def _trimmed(max_length: int) -> StringConstraints:
    return StringConstraints(strip_whitespace=True, min_length=1, max_length=max_length)


class PostInput(BaseModel):
    """Body of post create and update requests; the blog comes from the path."""

    model_config = ConfigDict(populate_by_name=True)

    title: Annotated[str, _trimmed(POST_TITLE_MAX_LENGTH)] = Field(
        ...,
        examples=["First day in Ubud"],
    )
    short_description: Annotated[str, _trimmed(POST_SHORT_DESCRIPTION_MAX_LENGTH)] = Field(
        ...,
        alias="shortDescription",
        examples=["Rice terraces and monkeys"],
    )
    content: Annotated[str, _trimmed(POST_CONTENT_MAX_LENGTH)] = Field(
        ...,
        examples=["We arrived early in the morning..."],
    )


class PostView(BaseModel):
    """Public projection of a post, denormalized with its blog name."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    title: str
    short_description: str = Field(alias="shortDescription")
    content: str
    blog_id: UUID = Field(alias="blogId")
    blog_name: str = Field(alias="blogName")
    created_at: str = Field(alias="createdAt")

    @classmethod
    def from_row(cls, post: PostDB, blog_name: str) -> "PostView":
        return cls(
            id=post.id,
            title=post.title,
            short_description=post.short_description,
            content=post.content,
            blog_id=post.blog_id,
            blog_name=blog_name,
            created_at=to_iso(post.created_at) or "",
        )
