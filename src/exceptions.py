"""Service error taxonomy.

Each error is an ``HTTPException`` carrying its own status code, so the
services can raise them directly and FastAPI renders ``{"detail": ...}``.
"""

from fastapi import HTTPException, status

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


class ServiceError(HTTPException):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    headers: dict[str, str] | None = None

    def __init__(self, detail: str):
        super().__init__(status_code=self.status_code, detail=detail, headers=self.headers)


class ValidationError(ServiceError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(ServiceError):
    """Bad credentials. The message never says which part was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    headers = BEARER_CHALLENGE


class MissingAuthError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = BEARER_CHALLENGE


class MalformedAuthError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = BEARER_CHALLENGE


class InvalidTokenError(ServiceError):
    """Bad signature or expired token."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT


class StorageError(ServiceError):
    """Opaque server-side failure; details are logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
