"""Blog service: create, read, update and delete with ownership rules."""

import logging
from typing import Any

from bloglist.errors import Forbidden, InvalidToken, NotFound, Unauthorized, ValidationError
from bloglist.models.blog import Blog
from bloglist.repositories.base import BlogRepository, UserRepository
from bloglist.schemas.auth import CurrentUser
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "url")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_new_blog(payload: BlogCreate) -> dict[str, Any]:
    """Check a create payload and return the fields for a new blog row.

    Raises:
        ValidationError: ``title`` or ``url`` is missing or blank.
    """
    missing = [field for field in REQUIRED_FIELDS if _blank(getattr(payload, field))]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
    return {
        "title": payload.title,
        "author": payload.author,
        "url": payload.url,
        "likes": payload.likes if payload.likes is not None else 0,
    }


def validate_blog_changes(payload: BlogUpdate) -> dict[str, Any]:
    """Return only the fields present in an update payload.

    Fields that were sent must still be valid: ``title`` and ``url`` can't be
    cleared, and ``likes`` can't be null.
    """
    changes = payload.model_dump(exclude_unset=True)
    cleared = [field for field in REQUIRED_FIELDS if field in changes and _blank(changes[field])]
    if cleared:
        raise ValidationError(f"Field(s) cannot be empty: {', '.join(cleared)}")
    if "likes" in changes and changes["likes"] is None:
        raise ValidationError("likes must be a non-negative integer")
    return changes


class BlogService:
    """Service for blog-related operations."""

    def __init__(self, blogs: BlogRepository, users: UserRepository):
        self.blogs = blogs
        self.users = users

    def list_blogs(self) -> list[BlogResponse]:
        """All blogs with their owners populated."""
        return self.blogs.populate(self.blogs.list_all())

    def get_blog(self, blog_id: int) -> BlogResponse:
        blog = self._get_or_404(blog_id)
        return self.blogs.populate([blog])[0]

    def create_blog(self, payload: BlogCreate, current_user: CurrentUser | None) -> BlogResponse:
        """Create a blog owned by the authenticated user."""
        if current_user is None:
            raise Unauthorized()
        fields = validate_new_blog(payload)

        owner = self.users.get(current_user.id)
        if owner is None:
            raise InvalidToken("User not found")
        # Ids can be reused after an account is deleted
        if owner.username != current_user.username:
            raise InvalidToken()

        blog = self.blogs.add(Blog(**fields, user_id=owner.id), owner)
        logger.info(f"User {owner.id} created blog {blog.id}")
        return self.blogs.populate([blog])[0]

    def update_blog(self, blog_id: int, payload: BlogUpdate) -> BlogResponse:
        """Apply a partial update.

        Open to any caller: unlike delete, no token or ownership is required.
        """
        blog = self._get_or_404(blog_id)
        changes = validate_blog_changes(payload)
        if changes:
            blog = self.blogs.update(blog, changes)
        return self.blogs.populate([blog])[0]

    def delete_blog(self, blog_id: int, current_user: CurrentUser | None) -> None:
        """Delete a blog. Only its owner may do this."""
        if current_user is None:
            raise Unauthorized()
        blog = self._get_or_404(blog_id)
        if blog.user_id != current_user.id:
            raise Forbidden("Only the creator can delete a blog")
        self.blogs.delete(blog)
        logger.info(f"User {current_user.id} deleted blog {blog_id}")

    def _get_or_404(self, blog_id: int) -> Blog:
        blog = self.blogs.get(blog_id)
        if blog is None:
            raise NotFound("Blog not found")
        return blog
