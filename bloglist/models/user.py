"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from bloglist.database import Base
from bloglist.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and blog ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(255), nullable=True)
    password_hash = Column(String(255), nullable=False)

    # Back-reference to owned blogs; Blog.user_id is the source of truth
    blogs = relationship("Blog", back_populates="user", order_by="Blog.id")

    @property
    def blog_ids(self) -> list[int]:
        """Ids of the blogs this user owns, in creation order."""
        return [blog.id for blog in self.blogs]
