"""SQLAlchemy-backed blog repository."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.orm import Session

from bloglist.models.blog import Blog
from bloglist.models.user import User
from bloglist.repositories.base import attach_owners
from bloglist.schemas.blog import BlogResponse

logger = logging.getLogger(__name__)


class SqlBlogRepository:
    """Blogs stored in the relational database.

    Every write commits once, so the blog row and the owner's back-reference
    either change together or not at all.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[Blog]:
        return self.db.query(Blog).order_by(Blog.id).all()

    def get(self, blog_id: int) -> Blog | None:
        return self.db.query(Blog).filter(Blog.id == blog_id).first()

    def add(self, blog: Blog, owner: User) -> Blog:
        owner.blogs.append(blog)
        self.db.add(blog)
        self._commit()
        self.db.refresh(blog)
        return blog

    def update(self, blog: Blog, changes: Mapping[str, Any]) -> Blog:
        for field, value in changes.items():
            setattr(blog, field, value)
        self._commit()
        self.db.refresh(blog)
        return blog

    def delete(self, blog: Blog) -> None:
        # owner.blogs is loaded from blogs.user_id, so the row delete also
        # drops the id from it once the commit expires the session
        self.db.delete(blog)
        self._commit()

    def populate(self, blogs: Sequence[Blog]) -> list[BlogResponse]:
        owner_ids = {blog.user_id for blog in blogs}
        owners = {}
        if owner_ids:
            owners = {
                user.id: user
                for user in self.db.query(User).filter(User.id.in_(owner_ids)).all()
            }
        return attach_owners(blogs, owners)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            logger.exception("Rolling back blog transaction")
            self.db.rollback()
            raise
