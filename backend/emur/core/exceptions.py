"""
Domain Errors
Typed exceptions raised by services and translated into the JSON envelope
by the exception handlers registered in emur.middleware.error_handler.

Each error carries the HTTP status it maps to, so handlers never need to
inspect message text.
"""

from typing import Any, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class BadRequestError(AppError):
    """Malformed body, out-of-range value or duplicate business record."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    """Missing, malformed or expired bearer token."""
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(AppError):
    """Role or ownership violation."""
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    """A referenced UUID does not resolve."""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Unique constraint violation surfaced to the client (e.g. duplicate email)."""
    status_code = status.HTTP_409_CONFLICT


class InternalError(AppError):
    """Unexpected persistence, storage or encoding failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
