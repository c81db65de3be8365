from blogapp.services.auth import AuthService
from blogapp.services.blogs import BlogService
from blogapp.services.moderation import BanTransition, ModerationState, transition
from blogapp.services.posts import PostService
from blogapp.services.users import UserService

__all__ = [
    "AuthService",
    "BanTransition",
    "BlogService",
    "ModerationState",
    "PostService",
    "UserService",
    "transition",
]
