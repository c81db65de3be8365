"""Repository layer for database operations."""

from blogapp.repositories.base import BaseRepository, PageResult
from blogapp.repositories.blog import BlogRepository
from blogapp.repositories.post import PostRepository
from blogapp.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "BlogRepository",
    "PageResult",
    "PostRepository",
    "UserRepository",
]
