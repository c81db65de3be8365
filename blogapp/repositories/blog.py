"""Blog repository for database operations."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import Select, delete, select

from blogapp.models import BlogDB, PostDB, UserDB
from blogapp.repositories.base import BaseRepository, Column, PageResult
from blogapp.schemas.query import BlogSortField, ListQuery

SORT_COLUMNS: dict[BlogSortField, Column] = {
    BlogSortField.ID: BlogDB.id,
    BlogSortField.NAME: BlogDB.name,
    BlogSortField.DESCRIPTION: BlogDB.description,
    BlogSortField.WEBSITE_URL: BlogDB.website_url,
    BlogSortField.CREATED_AT: BlogDB.created_at,
}

SEARCH_COLUMNS: dict[str, Column] = {"name": BlogDB.name}


def visible_blog_conditions() -> list[Any]:
    """Predicates a blog must satisfy to appear in public views."""
    return [BlogDB.is_banned.is_(False), UserDB.is_banned.is_(False)]


def _with_owner(statement: Select[Any]) -> Select[Any]:
    return statement.join(UserDB, UserDB.id == BlogDB.owner_id)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Public queries join the owner so that blogs of banned users disappear
    together with blogs banned directly.
    """

    model = BlogDB

    async def list_public(self, query: ListQuery) -> PageResult:
        statement = _with_owner(select(BlogDB)).where(*visible_blog_conditions())
        return await self.find_page(
            statement,
            query,
            search_columns=SEARCH_COLUMNS,
            sort_columns=SORT_COLUMNS,
        )

    async def list_for_owner(self, owner_id: UUID, query: ListQuery) -> PageResult:
        statement = select(BlogDB).where(BlogDB.owner_id == owner_id)
        return await self.find_page(
            statement,
            query,
            search_columns=SEARCH_COLUMNS,
            sort_columns=SORT_COLUMNS,
        )

    async def list_for_admin(self, query: ListQuery) -> PageResult:
        """List every blog with its owner's login; rows are ``(BlogDB, login)``."""
        statement = _with_owner(select(BlogDB, UserDB.login))
        return await self.find_page(
            statement,
            query,
            search_columns=SEARCH_COLUMNS,
            sort_columns=SORT_COLUMNS,
            ban_column=BlogDB.is_banned,
        )

    async def get_visible(self, blog_id: UUID) -> BlogDB | None:
        """Get a blog by ID unless it is hidden from public views."""
        statement = _with_owner(select(BlogDB)).where(
            BlogDB.id == blog_id,
            *visible_blog_conditions(),
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def set_ban(self, blog_id: UUID, *, is_banned: bool, ban_date: datetime | None) -> bool:
        return await self.update_fields(blog_id, is_banned=is_banned, ban_date=ban_date)

    async def delete_by_id(self, record_id: UUID) -> bool:
        """Delete a blog and its posts."""
        await self.session.execute(delete(PostDB).where(PostDB.blog_id == record_id))
        return await super().delete_by_id(record_id)
