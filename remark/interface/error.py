"""Interface layer errors and HTTP status mapping."""

from fastapi import status

from remark.adapter.error import AdapterError, AuthProviderError
from remark.domain.error import (
    AuthenticationError,
    ConflictError,
    ContentDeletedException,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    PolicyViolationError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class RateLimitExceededError(InterfaceError):
    """Caller exceeded the request rate."""

    def __init__(self, message: str = "Rate limit exceeded, try again later"):
        super().__init__(message)


# Most specific classes first
STATUS_MAP: list[tuple[type[Exception], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ContentDeletedException, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (PolicyViolationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (RateLimitExceededError, status.HTTP_429_TOO_MANY_REQUESTS),
    (AuthProviderError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (AdapterError, status.HTTP_502_BAD_GATEWAY),
    (DomainError, status.HTTP_400_BAD_REQUEST),
]


def http_status_for(error: Exception) -> int:
    """HTTP status code for a domain, adapter or interface error."""
    for error_type, code in STATUS_MAP:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
