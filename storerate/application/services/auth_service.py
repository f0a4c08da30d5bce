"""Auth service — password hashing and opaque auth tokens."""

import secrets
from typing import Optional

import structlog
from passlib.context import CryptContext

from storerate.config import get_settings
from storerate.domain.models.user import User
from storerate.domain.repositories.user_repository import UserRepository

settings = get_settings()
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)
logger = structlog.get_logger(__name__)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def generate_auth_token(repo: UserRepository) -> str:
    """Random url-safe token not held by any other user."""
    while True:
        token = secrets.token_urlsafe(settings.AUTH_TOKEN_BYTES)
        if not repo.auth_token_taken(token):
            return token


def authenticate_user(repo: UserRepository, email: str, password: str) -> Optional[User]:
    user = repo.get_by_email(email)
    if not user or not verify_password(password, user.password_digest):
        logger.info("Authentication failed", email=email)
        return None
    if not user.active:
        logger.info("Authentication refused for inactive user", user_id=user.id)
        return None
    return user


def authenticate_token(repo: UserRepository, token: str) -> Optional[User]:
    if not token:
        return None
    user = repo.get_by_auth_token(token)
    if user is None or not user.active:
        return None
    return user
