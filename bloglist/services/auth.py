"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from bloglist.config import get_settings
from bloglist.errors import InvalidCredentials
from bloglist.models.user import User
from bloglist.repositories.base import UserRepository
from bloglist.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(
    user_id: int, username: str, expires_delta: timedelta | None = None
) -> str:
    """Create a JWT access token."""
    issued_at = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "username": username,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return encoded_jwt


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token. Expired tokens are rejected."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        return payload
    except JWTError:
        return None


def authenticate_user(users: UserRepository, username: str, password: str) -> User:
    """Authenticate a user by username and password.

    Unknown usernames and wrong passwords fail identically.
    """
    user = users.get_by_username(username)
    if user is None:
        # Spend the same hashing time as a real check
        pwd_context.dummy_verify()
        logger.warning(f"Failed login for unknown username '{username}'")
        raise InvalidCredentials()
    if not verify_password(password, user.password_hash):
        logger.warning(f"Failed login for user {user.id}")
        raise InvalidCredentials()
    return user


def login(users: UserRepository, username: str, password: str) -> LoginResponse:
    """Check credentials and issue an access token."""
    user = authenticate_user(users, username, password)
    token = create_access_token(user.id, user.username)
    logger.info(f"User {user.id} logged in")
    return LoginResponse(token=token, username=user.username, name=user.name)
