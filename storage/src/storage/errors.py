"""Domain errors raised by the storage services.

Each condition is its own exception type carrying a stable string ``code``;
the HTTP layer decides the status code.
"""

from typing import Optional


class DomainError(Exception):
    code = "INTERNAL_ERROR"
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationFailed(DomainError):
    code = "VALIDATION_ERROR"
    message = "Invalid input data"


class TodoNotFound(DomainError):
    code = "TODO_NOT_FOUND"
    message = "Todo not found"


class Forbidden(DomainError):
    code = "FORBIDDEN"
    message = "Access denied to this todo"


class InvalidDateRange(DomainError):
    code = "INVALID_DATE_RANGE"
    message = "Due date cannot be before start date"


class TodoIsDeleted(DomainError):
    code = "TODO_IS_DELETED"
    message = "Cannot complete a deleted todo"


class TodoNotDeleted(DomainError):
    code = "TODO_NOT_DELETED"
    message = "Todo is not in deleted status"


class EmailExists(DomainError):
    code = "EMAIL_EXISTS"
    message = "Email already exists"


class InvalidCredentials(DomainError):
    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"


class Unauthorized(DomainError):
    code = "UNAUTHORIZED"
    message = "Authorization token is required"


class InvalidToken(DomainError):
    code = "INVALID_TOKEN"
    message = "Invalid authorization token"


class TokenExpired(DomainError):
    code = "TOKEN_EXPIRED"
    message = "Token has expired"


class NoToken(DomainError):
    code = "NO_TOKEN"
    message = "Refresh token is required"


class UserNotFound(DomainError):
    code = "USER_NOT_FOUND"
    message = "User not found"


class HolidayNotFound(DomainError):
    code = "HOLIDAY_NOT_FOUND"
    message = "Holiday not found"
