"""Maps domain errors to HTTP responses.

Only the error category decides the status code. Messages are the
user-safe ones carried by the error; internal details are never exposed.
"""

from loguru import logger
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from catalog.domain.errors import (
    DomainError,
    InvalidRequestError,
    NotFoundError,
    StorageFailureError,
    UnauthorizedError,
)
from orders.domain.errors import InsufficientInventoryError

STATUS_BY_CATEGORY: list[tuple[type[DomainError], int]] = [
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (InvalidRequestError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InsufficientInventoryError, status.HTTP_409_CONFLICT),
    (StorageFailureError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(error: DomainError) -> int:
    for category, code in STATUS_BY_CATEGORY:
        if isinstance(error, category):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def domain_exception_handler(exc, context):
    """DRF exception handler that understands DomainError."""
    if isinstance(exc, DomainError):
        code = status_for(exc)
        if code >= 500:
            logger.error("Request failed with {}", exc)
        body = {"code": exc.code.value, "message": exc.message, **exc.details}
        return Response(body, status=code)
    return exception_handler(exc, context)
