"""User schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """User signup request."""

    username: str = Field(..., min_length=3, max_length=255)
    name: str | None = Field(None, max_length=255)
    password: str = Field(..., min_length=3, max_length=128)


class UserBlog(BaseModel):
    """Blog summary populated into a user on read."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str | None
    url: str


class UserResponse(BaseModel):
    """User information response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str | None
    blogs: list[UserBlog] = []
