from postkeeper.web.routers.auth import router as auth_router
from postkeeper.web.routers.posts import router as posts_router
from postkeeper.web.routers.profile import router as profile_router

__all__ = [
    "auth_router",
    "posts_router",
    "profile_router",
]
