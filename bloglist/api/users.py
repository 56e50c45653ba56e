"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from bloglist.api.dependencies import get_user_repository
from bloglist.repositories.users import SqlUserRepository
from bloglist.schemas.user import UserCreate, UserResponse
from bloglist.services.users import create_user, list_users

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def get_users(users: Annotated[SqlUserRepository, Depends(get_user_repository)]):
    """Get all users with their blogs."""
    return list_users(users)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserCreate,
    users: Annotated[SqlUserRepository, Depends(get_user_repository)],
):
    """Register a new user."""
    return create_user(users, user_data)
