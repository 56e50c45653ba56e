"""Pydantic schemas for API requests and responses."""

from bloglist.schemas.auth import CurrentUser, LoginRequest, LoginResponse
from bloglist.schemas.blog import BlogCreate, BlogOwner, BlogResponse, BlogUpdate
from bloglist.schemas.user import UserBlog, UserCreate, UserResponse

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "CurrentUser",
    "BlogCreate",
    "BlogUpdate",
    "BlogOwner",
    "BlogResponse",
    "UserCreate",
    "UserBlog",
    "UserResponse",
]
