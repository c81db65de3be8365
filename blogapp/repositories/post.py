"""Post repository for database operations."""

from typing import Any
from uuid import UUID

from sqlalchemy import Row, Select, select

from blogapp.models import BlogDB, PostDB, UserDB
from blogapp.repositories.base import BaseRepository, Column, PageResult
from blogapp.repositories.blog import visible_blog_conditions
from blogapp.schemas.query import ListQuery, PostSortField

SORT_COLUMNS: dict[PostSortField, Column] = {
    PostSortField.ID: PostDB.id,
    PostSortField.TITLE: PostDB.title,
    PostSortField.SHORT_DESCRIPTION: PostDB.short_description,
    PostSortField.CONTENT: PostDB.content,
    PostSortField.BLOG_ID: PostDB.blog_id,
    PostSortField.BLOG_NAME: BlogDB.name,
    PostSortField.CREATED_AT: PostDB.created_at,
}


def _posts_with_blog(*, public: bool) -> Select[Any]:
    # Rows are (PostDB, blog name)
    statement = select(PostDB, BlogDB.name).join(BlogDB, BlogDB.id == PostDB.blog_id)
    if public:
        statement = statement.join(UserDB, UserDB.id == BlogDB.owner_id).where(
            *visible_blog_conditions(),
        )
    return statement


class PostRepository(BaseRepository[PostDB]):
    """Repository for Post database operations."""

    model = PostDB

    async def list_public(self, query: ListQuery) -> PageResult:
        return await self.find_page(
            _posts_with_blog(public=True),
            query,
            search_columns={},
            sort_columns=SORT_COLUMNS,
        )

    async def list_for_blog(
        self,
        blog_id: UUID,
        query: ListQuery,
        *,
        public: bool = True,
    ) -> PageResult:
        statement = _posts_with_blog(public=public).where(PostDB.blog_id == blog_id)
        return await self.find_page(
            statement,
            query,
            search_columns={},
            sort_columns=SORT_COLUMNS,
        )

    async def get_visible(self, post_id: UUID) -> Row[Any] | None:
        """Get ``(post, blog name)`` unless the post's blog is hidden."""
        statement = _posts_with_blog(public=True).where(PostDB.id == post_id)
        result = await self.session.execute(statement)
        return result.one_or_none()

    async def get_in_blog(self, post_id: UUID, blog_id: UUID) -> PostDB | None:
        statement = select(PostDB).where(PostDB.id == post_id, PostDB.blog_id == blog_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()
