"""Interface layer errors and their HTTP translation."""

import logfire
from fastapi import HTTPException, status

from learnhub.domain.error import (
    AlreadyExistsError,
    DomainError,
    EditWindowExpiredError,
    MismatchError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from learnhub.persistence.error import StoreError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Missing or malformed identity forwarded by the auth layer."""

    pass


def to_http_exception(error: Exception) -> HTTPException:
    """Translate a domain or store error into an HTTP error response.

    Args:
        error: Error raised while serving the request

    Returns:
        HTTPException carrying the matching status code
    """
    if isinstance(error, AuthenticationError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, (ValidationError, MismatchError)):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (NotAuthorizedError, EditWindowExpiredError)):
        return HTTPException(status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, AlreadyExistsError):
        return HTTPException(status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, StoreError):
        logfire.error("Store failure while serving request", error=str(error))
        return HTTPException(
            status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error"
        )
    if isinstance(error, DomainError):
        return HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(error))
    raise error
