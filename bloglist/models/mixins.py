"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, func


class TimestampMixin:
    """Server-side created_at/updated_at columns for users and blogs."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
