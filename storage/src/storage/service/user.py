"""User service: registration, credentials and profile."""

from typing import Optional

import bcrypt
from loguru import logger

from storage.entity.dto import User, UserPatch
from storage.errors import EmailExists, InvalidCredentials, UserNotFound, ValidationFailed
from storage.repository import get_repositories
from storage.util import generate_id

BCRYPT_ROUNDS = 10


def _user_repo():
    return get_repositories().users


def normalize_email(email: str) -> str:
    return email.strip().lower()


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    try:
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
    except ValueError as e:
        # bcrypt refuses passwords over 72 bytes
        raise ValidationFailed("Password is too long") from e


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed hash or over-long password, treat as a mismatch
        return False


def create_user(email: str, password: str, username: str, role: str = "user") -> User:
    email = normalize_email(email)
    if _user_repo().get_user_by_email(email):
        raise EmailExists()
    user = User(
        user_id=generate_id(),
        email=email,
        username=username.strip(),
        password_hash=hash_password(password),
        role=role,
    )
    user = _user_repo().create_user(user)
    logger.info("User registered user_id={} role={}", user.user_id, user.role)
    return user


def register_user(email: str, password: str, username: str) -> User:
    return create_user(email, password, username, role="user")


def authenticate(email: str, password: str) -> User:
    user = _user_repo().get_user_by_email(normalize_email(email))
    if not user or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt")
        raise InvalidCredentials()
    return user


def get_user(user_id: str) -> Optional[User]:
    return _user_repo().get_user(user_id)


def get_profile(user_id: str) -> User:
    user = _user_repo().get_user(user_id)
    if not user:
        raise UserNotFound()
    return user


def update_profile(user_id: str, username: Optional[str] = None, password: Optional[str] = None) -> User:
    patch = UserPatch()
    if username is not None:
        patch.username = username.strip()
    if password is not None:
        patch.password_hash = hash_password(password)
    if patch.is_empty():
        raise ValidationFailed("At least one field (username or password) must be provided")
    user = _user_repo().update_user(user_id, patch)
    if not user:
        raise UserNotFound()
    logger.info("Profile updated user_id={} fields={}", user_id, sorted(patch.changes()))
    return user


def ensure_admin(email: str, password: str, username: str = "admin") -> User:
    """Create the admin account unless the email is already registered."""
    existing = _user_repo().get_user_by_email(normalize_email(email))
    if existing:
        return existing
    return create_user(email, password, username, role="admin")
