"""Map domain and framework errors onto the JSON envelope."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from storage import errors
from api.response import failure

STATUS_BY_ERROR = {
    errors.ValidationFailed: 400,
    errors.InvalidDateRange: 400,
    errors.TodoIsDeleted: 400,
    errors.TodoNotDeleted: 400,
    errors.Unauthorized: 401,
    errors.InvalidCredentials: 401,
    errors.InvalidToken: 401,
    errors.TokenExpired: 401,
    errors.NoToken: 401,
    errors.Forbidden: 403,
    errors.TodoNotFound: 404,
    errors.UserNotFound: 404,
    errors.HolidayNotFound: 404,
    errors.EmailExists: 409,
}

HTTP_CODES = {
    404: ("NOT_FOUND", "Requested resource not found"),
    405: ("METHOD_NOT_ALLOWED", "Method not allowed"),
    413: ("PAYLOAD_TOO_LARGE", "Request payload is too large"),
}


def status_for(exc: errors.DomainError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


def _field(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return ".".join(parts)


async def domain_error_handler(request: Request, exc: errors.DomainError):
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("Unmapped domain error {} on {} {}", exc.code, request.method, request.url.path)
    else:
        logger.info("{} {} -> {} {}", request.method, request.url.path, status_code, exc.code)
    return failure(exc.code, exc.message, status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return failure("INVALID_JSON", "Invalid JSON format in request body", 400)
    details = [{"field": _field(err.get("loc", ())), "message": err.get("msg", "")} for err in exc.errors()]
    logger.info("{} {} -> 400 VALIDATION_ERROR {}", request.method, request.url.path, details)
    return failure("VALIDATION_ERROR", "Invalid input data", 400, details=details)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    code, message = HTTP_CODES.get(exc.status_code, ("HTTP_ERROR", str(exc.detail)))
    return failure(code, message, exc.status_code, headers=getattr(exc, "headers", None))


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on {} {}", request.method, request.url.path)
    return failure("INTERNAL_ERROR", "Internal server error", 500)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(errors.DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
