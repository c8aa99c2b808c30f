"""Application exception hierarchy.

Services raise these; the error middleware turns them into JSON responses.
"""
from typing import Any, Dict, Optional

from fastapi import status


class StorefrontError(Exception):
    """Base exception for the application."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class BadRequestError(StorefrontError):
    """Request is well-formed but cannot be fulfilled."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(StorefrontError):
    """Authentication failed or credentials are missing."""

    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(StorefrontError):
    """Authenticated user lacks the required role."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(StorefrontError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(StorefrontError):
    """Operation conflicts with the current resource state."""

    status_code = status.HTTP_409_CONFLICT


class DatabaseUnavailableError(StorefrontError):
    """Database connection failed at startup."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ServiceUnavailableError(StorefrontError):
    """An optional collaborator (push, realtime) is not configured."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
