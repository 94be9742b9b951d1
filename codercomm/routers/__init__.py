"""Aggregate router exports."""
from .auth import router as auth_router
from .friends import router as friends_router
from .posts import router as posts_router
from .reactions import router as reactions_router
from .system import router as system_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "friends_router",
    "posts_router",
    "reactions_router",
    "system_router",
    "users_router",
]
