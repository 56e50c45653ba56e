"""Login endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bloglist.api.dependencies import get_user_repository
from bloglist.repositories.users import SqlUserRepository
from bloglist.schemas.auth import LoginRequest, LoginResponse
from bloglist.services.auth import login as login_user

router = APIRouter(prefix="/api/login", tags=["auth"])


@router.post("", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    users: Annotated[SqlUserRepository, Depends(get_user_repository)],
):
    """Login with username and password."""
    return login_user(users, credentials.username, credentials.password)
