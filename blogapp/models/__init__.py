"""Database models for the application."""

from blogapp.models.blog import BlogDB
from blogapp.models.post import PostDB
from blogapp.models.user import UserDB

__all__ = ["BlogDB", "PostDB", "UserDB"]
