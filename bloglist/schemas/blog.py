"""Blog schemas."""

from pydantic import BaseModel, ConfigDict, Field


class BlogCreate(BaseModel):
    """Create a new blog.

    ``title`` and ``url`` are optional here so that a missing field is
    reported by the blog service as a 400 rather than by request parsing.
    """

    title: str | None = Field(None, max_length=255)
    author: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=2048)
    likes: int | None = Field(None, ge=0)


class BlogUpdate(BaseModel):
    """Update a blog. Only the fields sent are applied."""

    title: str | None = Field(None, max_length=255)
    author: str | None = Field(None, max_length=255)
    url: str | None = Field(None, max_length=2048)
    likes: int | None = Field(None, ge=0)


class BlogOwner(BaseModel):
    """Owner fields populated into a blog on read."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str | None


class BlogResponse(BaseModel):
    """Blog response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str | None
    url: str
    likes: int
    user: BlogOwner | None = None
