"""SQLAlchemy model package."""

from wordblog.models.user import User
from wordblog.models.blog import Blog

__all__ = [
    "User",
    "Blog",
]
