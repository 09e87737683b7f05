"""Translation of domain errors to HTTP responses."""

from fastapi import HTTPException, status

from lounge.domain.error import (
    DomainError,
    DuplicateVoteError,
    InvalidStateError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (QuotaExceededError, status.HTTP_403_FORBIDDEN),
    (DuplicateVoteError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidStateError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTPException a route should raise.

    Unlisted domain errors are treated as bad requests.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
