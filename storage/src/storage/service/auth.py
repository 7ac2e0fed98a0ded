"""JWT issuance and verification.

Access and refresh tokens carry the same identity claims but are signed
with different secrets, so one can never stand in for the other. Refresh
only re-issues an access token; the refresh token itself is reused until
it expires.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from loguru import logger

from storage.config import Settings, get_settings
from storage.entity.dto import User
from storage.errors import InvalidToken, NoToken, TokenExpired
from storage.service import user as user_service

ALGORITHM = "HS256"


@dataclass
class Identity:
    user_id: str
    email: str
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def _claims(user: User) -> Dict[str, Any]:
    return {
        "userId": user.user_id,
        "email": user.email,
        "username": user.username,
        "role": user.role,
    }


def _sign(user: User, secret: str, lifetime: timedelta) -> str:
    now = datetime.now(timezone.utc)
    payload = dict(_claims(user), iat=now, exp=now + lifetime)
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def create_access_token(user: User, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    return _sign(user, settings.jwt_secret, timedelta(minutes=settings.jwt_expires_minutes))


def create_refresh_token(user: User, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    return _sign(user, settings.refresh_token_secret, timedelta(days=settings.refresh_token_expires_days))


def _decode(token: str, secret: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired() from e
    except jwt.InvalidTokenError as e:
        raise InvalidToken() from e
    if not payload.get("userId"):
        raise InvalidToken()
    return payload


def verify_access_token(token: str, settings: Optional[Settings] = None) -> Identity:
    settings = settings or get_settings()
    payload = _decode(token, settings.jwt_secret)
    return Identity(
        user_id=payload["userId"],
        email=payload.get("email", ""),
        username=payload.get("username", ""),
        role=payload.get("role", "user"),
    )


def login(email: str, password: str, settings: Optional[Settings] = None) -> Dict[str, Any]:
    user = user_service.authenticate(email, password)
    logger.info("User logged in user_id={}", user.user_id)
    return {
        "accessToken": create_access_token(user, settings),
        "refreshToken": create_refresh_token(user, settings),
        "user": user.to_dict(),
    }


def refresh_access_token(refresh_token: str, settings: Optional[Settings] = None) -> Dict[str, str]:
    if not refresh_token:
        raise NoToken()
    settings = settings or get_settings()
    try:
        payload = _decode(refresh_token, settings.refresh_token_secret)
    except TokenExpired as e:
        raise InvalidToken("Refresh token expired") from e
    except InvalidToken as e:
        raise InvalidToken("Invalid refresh token") from e
    user = user_service.get_user(payload["userId"])
    if not user:
        raise InvalidToken("Invalid refresh token")
    return {"accessToken": create_access_token(user, settings)}
