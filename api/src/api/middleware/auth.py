"""Bearer-token authentication for /api routes."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from storage.config import Settings
from storage.errors import DomainError, Unauthorized
from storage.service.auth import verify_access_token
from api.errors import status_for
from api.response import failure

PUBLIC_PATHS = {
    "/api",
    "/api/auth/register",
    "/api/auth/login",
    "/api/auth/refresh",
}


def is_public(path: str) -> bool:
    path = path.rstrip("/") or "/"
    return not path.startswith("/api") or path in PUBLIC_PATHS


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or is_public(request.url.path):
            return await call_next(request)

        header = request.headers.get("authorization", "")
        try:
            if not header.startswith("Bearer "):
                raise Unauthorized()
            request.state.user = verify_access_token(header[len("Bearer "):].strip(), self.settings)
        except DomainError as e:
            return failure(e.code, e.message, status_for(e))
        request.state.user_id = request.state.user.user_id
        return await call_next(request)
