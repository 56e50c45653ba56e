"""Repository interfaces for blog and user storage.

The blog service only talks to these protocols, so the SQLAlchemy
implementations can be swapped for in-memory ones in tests.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from bloglist.models.blog import Blog
from bloglist.models.user import User
from bloglist.schemas.blog import BlogOwner, BlogResponse


class UserRepository(Protocol):
    def list_all(self) -> list[User]: ...

    def get(self, user_id: int) -> User | None: ...

    def get_by_username(self, username: str) -> User | None: ...

    def add(self, user: User) -> User: ...


class BlogRepository(Protocol):
    def list_all(self) -> list[Blog]: ...

    def get(self, blog_id: int) -> Blog | None: ...

    def add(self, blog: Blog, owner: User) -> Blog:
        """Store ``blog`` and append it to ``owner.blogs`` as one unit."""
        ...

    def update(self, blog: Blog, changes: Mapping[str, Any]) -> Blog: ...

    def delete(self, blog: Blog) -> None:
        """Remove ``blog`` and its id from the owner's blogs as one unit."""
        ...

    def populate(self, blogs: Sequence[Blog]) -> list[BlogResponse]:
        """Join each blog with its owner's public fields."""
        ...


def attach_owners(blogs: Sequence[Blog], owners: Mapping[int, User]) -> list[BlogResponse]:
    """Build blog responses with the owner looked up in ``owners`` by id."""
    populated = []
    for blog in blogs:
        owner = owners.get(blog.user_id)
        populated.append(
            BlogResponse(
                id=blog.id,
                title=blog.title,
                author=blog.author,
                url=blog.url,
                likes=blog.likes,
                user=BlogOwner.model_validate(owner) if owner is not None else None,
            )
        )
    return populated
