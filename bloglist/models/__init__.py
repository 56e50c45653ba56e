"""SQLAlchemy models."""

from bloglist.models.blog import Blog
from bloglist.models.user import User

__all__ = [
    "User",
    "Blog",
]
