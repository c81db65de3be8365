"""Blog use cases for public readers, bloggers and super admins."""

from uuid import UUID

from blogapp.errors.auth import ForbiddenError
from blogapp.managers.metrics import metrics_manager
from blogapp.models import BlogDB, UserDB
from blogapp.monitoring import get_logger
from blogapp.repositories import BlogRepository
from blogapp.schemas.ban import BanBlogInput
from blogapp.schemas.blog import AdminBlogView, BlogInput, BlogView
from blogapp.schemas.query import ListQuery, Page
from blogapp.services.moderation import transition

logger = get_logger(__name__)


class BlogService:
    """Service for blog listing, ownership-checked mutations and moderation."""

    def __init__(self, blog_repo: BlogRepository) -> None:
        self.blog_repo = blog_repo

    async def list_public(self, query: ListQuery) -> Page[BlogView]:
        result = await self.blog_repo.list_public(query)
        items = [BlogView.from_db(blog) for (blog,) in result.rows]
        return Page[BlogView].of(query, result.total_count, items)

    async def list_for_owner(self, owner_id: UUID, query: ListQuery) -> Page[BlogView]:
        result = await self.blog_repo.list_for_owner(owner_id, query)
        items = [BlogView.from_db(blog) for (blog,) in result.rows]
        return Page[BlogView].of(query, result.total_count, items)

    async def list_for_admin(self, query: ListQuery) -> Page[AdminBlogView]:
        result = await self.blog_repo.list_for_admin(query)
        items = [AdminBlogView.from_row(blog, login) for blog, login in result.rows]
        return Page[AdminBlogView].of(query, result.total_count, items)

    async def get_public(self, blog_id: UUID) -> BlogView | None:
        blog = await self.blog_repo.get_visible(blog_id)
        return BlogView.from_db(blog) if blog else None

    async def get_owned(self, blog_id: UUID, owner_id: UUID) -> BlogDB | None:
        """
        Get a blog the caller is allowed to manage.

        Returns:
            BlogDB | None: The blog, or None when it does not exist.

        Raises:
            ForbiddenError: If the blog belongs to someone else.
        """
        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            return None
        if blog.owner_id != owner_id:
            raise ForbiddenError("Blog belongs to another user")
        return blog

    async def create(self, owner: UserDB, data: BlogInput) -> BlogView:
        blog = await self.blog_repo.add(
            BlogDB(
                owner_id=owner.id,
                name=data.name,
                description=data.description,
                website_url=data.website_url,
            ),
        )
        logger.info("Blog created", blog_id=str(blog.id), owner_id=str(owner.id))
        return BlogView.from_db(blog)

    async def update(self, owner_id: UUID, blog_id: UUID, data: BlogInput) -> bool:
        if await self.get_owned(blog_id, owner_id) is None:
            return False
        return await self.blog_repo.update_fields(
            blog_id,
            name=data.name,
            description=data.description,
            website_url=data.website_url,
        )

    async def delete(self, owner_id: UUID, blog_id: UUID) -> bool:
        if await self.get_owned(blog_id, owner_id) is None:
            return False
        deleted = await self.blog_repo.delete_by_id(blog_id)
        logger.info("Blog deleted", blog_id=str(blog_id))
        return deleted

    async def set_ban_status(self, blog_id: UUID, data: BanBlogInput) -> bool:
        change = transition(data.is_banned, require_reason=False)
        updated = await self.blog_repo.set_ban(
            blog_id,
            is_banned=change.is_banned,
            ban_date=change.ban_date,
        )
        if updated:
            action = "blog.ban" if change.is_banned else "blog.unban"
            metrics_manager.record_moderation(action)
            logger.info("Blog moderation changed", blog_id=str(blog_id), state=change.state)
        return updated
