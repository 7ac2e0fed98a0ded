import uvicorn
from typing import Optional
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from storage.config import Settings, get_settings
from storage.bootstrap import configure_storage
from storage.service import user as user_service
from storage.util import get_utc_iso8601_timestamp

from api.controller.auth import router as auth_router
from api.controller.user import router as user_router
from api.controller.todo import router as todo_router
from api.controller.trash import router as trash_router
from api.controller.holiday import router as holiday_router
from api.errors import register_error_handlers
from api.middleware.auth import AuthMiddleware
from api.middleware.body_limit import BodyLimitMiddleware
from api.middleware.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware
from api.response import UnicodeJSONResponse

API_VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None, configure: bool = True) -> FastAPI:
    """Build the application.

    With configure=False the repository registry is left as the caller set
    it up (the test-suite injects in-memory repositories this way).
    """
    settings = settings or get_settings()
    if configure:
        configure_storage(settings)
    if settings.admin_email and settings.admin_password:
        admin = user_service.ensure_admin(settings.admin_email, settings.admin_password, settings.admin_username)
        logger.info("Admin account ready user_id={}", admin.user_id)

    app = FastAPI(title="WHS Todo API", version=API_VERSION, default_response_class=UnicodeJSONResponse)
    app.state.settings = settings

    # added innermost first: CORS -> body limit -> rate limit -> auth -> routes
    app.add_middleware(AuthMiddleware, settings=settings)
    if settings.rate_limit_max_requests > 0:
        limiter = FixedWindowRateLimiter(settings.rate_limit_max_requests, settings.rate_limit_window_seconds)
        app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.add_middleware(BodyLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origin.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return UnicodeJSONResponse({
            "success": True,
            "message": "Server is running",
            "timestamp": get_utc_iso8601_timestamp(),
        })

    api_router = APIRouter(prefix="/api")

    @api_router.get("")
    async def api_info():
        return UnicodeJSONResponse({
            "success": True,
            "message": "WHS-TodoList API Server",
            "version": API_VERSION,
        })

    api_router.include_router(auth_router)
    api_router.include_router(user_router)
    api_router.include_router(todo_router)
    api_router.include_router(trash_router)
    api_router.include_router(holiday_router)
    app.include_router(api_router)
    return app


def main():
    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
