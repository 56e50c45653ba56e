"""Authentication schemas."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """User login request."""

    username: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class LoginResponse(BaseModel):
    """Login response with token and display info."""

    token: str
    username: str
    name: str | None


class CurrentUser(BaseModel):
    """Identity resolved from a verified access token."""

    id: int
    username: str
