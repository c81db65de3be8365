"""User repository for database operations."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, or_, select

from blogapp.models import BlogDB, PostDB, UserDB
from blogapp.repositories.base import BaseRepository, Column, PageResult
from blogapp.schemas.query import ListQuery, UserSortField

SORT_COLUMNS: dict[UserSortField, Column] = {
    UserSortField.ID: UserDB.id,
    UserSortField.LOGIN: UserDB.login,
    UserSortField.EMAIL: UserDB.email,
    UserSortField.CREATED_AT: UserDB.created_at,
}

SEARCH_COLUMNS: dict[str, Column] = {"login": UserDB.login, "email": UserDB.email}


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    This class implements the repository pattern for User entities,
    including the moderation update and the cascading delete.
    """

    model = UserDB

    async def list_for_admin(self, query: ListQuery) -> PageResult:
        return await self.find_page(
            select(UserDB),
            query,
            search_columns=SEARCH_COLUMNS,
            sort_columns=SORT_COLUMNS,
            ban_column=UserDB.is_banned,
        )

    async def get_by_login_or_email(self, login_or_email: str) -> UserDB | None:
        """
        Get user by login or email.

        Args:
            login_or_email: Login or email to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(
            select(UserDB).where(
                or_(UserDB.login == login_or_email, UserDB.email == login_or_email),
            ),
        )
        return result.scalars().first()

    async def login_exists(self, login: str) -> bool:
        return await self._check_exists_by_field("login", login)

    async def email_exists(self, email: str) -> bool:
        return await self._check_exists_by_field("email", email)

    async def set_ban(
        self,
        user_id: UUID,
        *,
        is_banned: bool,
        ban_date: datetime | None,
        ban_reason: str | None,
    ) -> bool:
        return await self.update_fields(
            user_id,
            is_banned=is_banned,
            ban_date=ban_date,
            ban_reason=ban_reason,
        )

    async def delete_by_id(self, record_id: UUID) -> bool:
        """Delete a user together with their blogs and the posts of those blogs."""
        owned_blogs = select(BlogDB.id).where(BlogDB.owner_id == record_id)
        await self.session.execute(
            delete(PostDB)
            .where(PostDB.blog_id.in_(owned_blogs))
            .execution_options(synchronize_session=False),
        )
        await self.session.execute(delete(BlogDB).where(BlogDB.owner_id == record_id))
        return await super().delete_by_id(record_id)
