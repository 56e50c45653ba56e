"""Blog model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from bloglist.database import Base
from bloglist.models.mixins import TimestampMixin


class Blog(Base, TimestampMixin):
    """A titled link to a blog post, owned by exactly one user."""

    __tablename__ = "blogs"
    __table_args__ = (CheckConstraint("likes >= 0", name="ck_blogs_likes_non_negative"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=True)
    url = Column(String(2048), nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="blogs")
