"""Settings loaded from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_settings = None


@dataclass
class Settings:
    database_url: str = "sqlite:///./todo.db"
    storage_backend: str = "sql"
    jwt_secret: str = "default_secret"
    jwt_expires_minutes: int = 15
    refresh_token_secret: str = "refresh_default_secret"
    refresh_token_expires_days: int = 7
    cors_origin: str = "http://localhost:5173"
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: int = 900
    max_body_bytes: int = 100 * 1024
    admin_email: Optional[str] = None
    admin_password: Optional[str] = None
    admin_username: str = "admin"
    port: int = 3000


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        database_url=os.getenv("DATABASE_URL", Settings.database_url),
        storage_backend=os.getenv("STORAGE_BACKEND", Settings.storage_backend).lower(),
        jwt_secret=os.getenv("JWT_SECRET", Settings.jwt_secret),
        jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", Settings.jwt_expires_minutes)),
        refresh_token_secret=os.getenv("REFRESH_TOKEN_SECRET", Settings.refresh_token_secret),
        refresh_token_expires_days=int(os.getenv("REFRESH_TOKEN_EXPIRES_DAYS", Settings.refresh_token_expires_days)),
        cors_origin=os.getenv("CORS_ORIGIN", Settings.cors_origin),
        rate_limit_max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", Settings.rate_limit_max_requests)),
        rate_limit_window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", Settings.rate_limit_window_seconds)),
        max_body_bytes=int(os.getenv("MAX_BODY_BYTES", Settings.max_body_bytes)),
        admin_email=os.getenv("ADMIN_EMAIL") or None,
        admin_password=os.getenv("ADMIN_PASSWORD") or None,
        admin_username=os.getenv("ADMIN_USERNAME", Settings.admin_username),
        port=int(os.getenv("PORT", Settings.port)),
    )


def get_settings() -> Settings:
    """Load settings on first access."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Settings) -> None:
    global _settings
    _settings = settings
