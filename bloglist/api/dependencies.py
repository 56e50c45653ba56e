"""FastAPI dependencies for authentication, database and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bloglist.database import get_db
from bloglist.errors import InvalidToken, MissingToken
from bloglist.repositories.blogs import SqlBlogRepository
from bloglist.repositories.users import SqlUserRepository
from bloglist.schemas.auth import CurrentUser
from bloglist.services.auth import decode_access_token
from bloglist.services.blogs import BlogService

# auto_error is off so a missing header is reported as 401, not 403
security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> CurrentUser:
    """Resolve the bearer token to the caller's identity.

    Only the token is checked; the user row is not loaded.
    """
    if credentials is None:
        raise MissingToken()

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise InvalidToken()

    user_id = payload.get("sub")
    username = payload.get("username")
    if user_id is None or username is None:
        raise InvalidToken()

    try:
        current_user = CurrentUser(id=int(user_id), username=username)
    except ValueError as e:
        raise InvalidToken() from e

    request.state.user = current_user
    return current_user


def get_user_repository(
    db: Annotated[Session, Depends(get_db)],
) -> SqlUserRepository:
    """Get user repository bound to the request session."""
    return SqlUserRepository(db)


def get_blog_repository(
    db: Annotated[Session, Depends(get_db)],
) -> SqlBlogRepository:
    """Get blog repository bound to the request session."""
    return SqlBlogRepository(db)


def get_blog_service(
    blogs: Annotated[SqlBlogRepository, Depends(get_blog_repository)],
    users: Annotated[SqlUserRepository, Depends(get_user_repository)],
) -> BlogService:
    """Get blog service with dependencies."""
    return BlogService(blogs, users)
