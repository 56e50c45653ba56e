"""User signup and listing."""

import logging

from bloglist.errors import ValidationError
from bloglist.models.user import User
from bloglist.repositories.base import UserRepository
from bloglist.schemas.user import UserCreate, UserResponse
from bloglist.services.auth import get_password_hash

logger = logging.getLogger(__name__)


def create_user(users: UserRepository, payload: UserCreate) -> UserResponse:
    """Create a new user with a hashed password."""
    if users.get_by_username(payload.username) is not None:
        raise ValidationError("expected `username` to be unique")

    user = User(
        username=payload.username,
        name=payload.name,
        password_hash=get_password_hash(payload.password),
    )
    user = users.add(user)
    logger.info(f"Created user {user.id}")
    return UserResponse.model_validate(user)


def list_users(users: UserRepository) -> list[UserResponse]:
    """All users with their blogs populated."""
    return [UserResponse.model_validate(user) for user in users.list_all()]
