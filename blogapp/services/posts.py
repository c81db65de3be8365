"""Post use cases; posts are always managed through their blog."""

from uuid import UUID

from blogapp.models import PostDB
from blogapp.monitoring import get_logger
from blogapp.repositories import PostRepository
from blogapp.schemas.post import PostInput, PostView
from blogapp.schemas.query import ListQuery, Page
from blogapp.services.blogs import BlogService

logger = get_logger(__name__)


class PostService:
    """
    Service for post listing and mutations.

    Mutations go through ``BlogService.get_owned`` so that only the owner of
    the parent blog can touch its posts.
    """

    def __init__(self, post_repo: PostRepository, blog_service: BlogService) -> None:
        self.post_repo = post_repo
        self.blog_service = blog_service

    async def list_public(self, query: ListQuery) -> Page[PostView]:
        result = await self.post_repo.list_public(query)
        items = [PostView.from_row(post, blog_name) for post, blog_name in result.rows]
        return Page[PostView].of(query, result.total_count, items)

    async def list_for_blog(
        self,
        blog_id: UUID,
        query: ListQuery,
        *,
        owner_id: UUID | None = None,
    ) -> Page[PostView] | None:
        """
        List the posts of one blog.

        Args:
            blog_id: Parent blog.
            query: Normalized list query.
            owner_id: When given, the caller must own the blog and hidden
                (banned) blogs are still listed.

        Returns:
            Page[PostView] | None: None when the blog is missing or hidden.
        """
        if owner_id is None:
            if await self.blog_service.get_public(blog_id) is None:
                return None
        elif await self.blog_service.get_owned(blog_id, owner_id) is None:
            return None

        result = await self.post_repo.list_for_blog(blog_id, query, public=owner_id is None)
        items = [PostView.from_row(post, blog_name) for post, blog_name in result.rows]
        return Page[PostView].of(query, result.total_count, items)

    async def get_public(self, post_id: UUID) -> PostView | None:
        row = await self.post_repo.get_visible(post_id)
        if row is None:
            return None
        post, blog_name = row
        return PostView.from_row(post, blog_name)

    async def create(self, owner_id: UUID, blog_id: UUID, data: PostInput) -> PostView | None:
        blog = await self.blog_service.get_owned(blog_id, owner_id)
        if blog is None:
            return None
        post = await self.post_repo.add(
            PostDB(
                blog_id=blog.id,
                title=data.title,
                short_description=data.short_description,
                content=data.content,
            ),
        )
        logger.info("Post created", post_id=str(post.id), blog_id=str(blog.id))
        return PostView.from_row(post, blog.name)

    async def update(
        self,
        owner_id: UUID,
        blog_id: UUID,
        post_id: UUID,
        data: PostInput,
    ) -> bool:
        if not await self._owned_post_exists(owner_id, blog_id, post_id):
            return False
        return await self.post_repo.update_fields(
            post_id,
            title=data.title,
            short_description=data.short_description,
            content=data.content,
        )

    async def delete(self, owner_id: UUID, blog_id: UUID, post_id: UUID) -> bool:
        if not await self._owned_post_exists(owner_id, blog_id, post_id):
            return False
        return await self.post_repo.delete_by_id(post_id)

    async def _owned_post_exists(self, owner_id: UUID, blog_id: UUID, post_id: UUID) -> bool:
        if await self.blog_service.get_owned(blog_id, owner_id) is None:
            return False
        return await self.post_repo.get_in_blog(post_id, blog_id) is not None
