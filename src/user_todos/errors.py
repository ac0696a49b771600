from __future__ import annotations

from fastapi import status


# PUBLIC_INTERFACE
class ApiError(Exception):
    """
    Base class for errors surfaced to API clients.

    Rendered by the app-level exception handler as `{"error": message}` with
    `status_code` as the HTTP status.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    """A user or todo referenced by the request does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(ApiError):
    """Malformed id, duplicate username or a state change that was already applied."""

    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(ApiError):
    """The request is well-formed but not allowed, e.g. todo quota exceeded."""

    status_code = status.HTTP_403_FORBIDDEN
