from blogapp.routes.auth import router as auth_router
from blogapp.routes.blogger import router as blogger_router
from blogapp.routes.blogs import router as blogs_router
from blogapp.routes.posts import router as posts_router
from blogapp.routes.sa import router as sa_router
from blogapp.routes.testing import router as testing_router

__all__ = [
    "auth_router",
    "blogger_router",
    "blogs_router",
    "posts_router",
    "sa_router",
    "testing_router",
]
