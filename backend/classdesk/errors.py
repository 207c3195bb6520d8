"""Error types shared by the toolkit, services and routers."""

import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Operation failed. Please try again."


class ClassDeskError(Exception):
    """Base exception for teacher tool errors."""
    pass


class ValidationBlockedError(ClassDeskError, ValueError):
    """Raised when required input is missing or out of range."""
    def __init__(self, field: str, message: str = ""):
        self.field = field
        self.message = message or f"Missing or invalid value for: {field}"
        super().__init__(self.message)


class NotFoundError(ClassDeskError):
    """Raised when a referenced record does not exist."""
    def __init__(self, kind: str, record_id: str, message: str = ""):
        self.kind = kind
        self.record_id = record_id
        self.message = message or f"{kind} not found: {record_id}"
        super().__init__(self.message)


class InvalidStatusTransitionError(ClassDeskError):
    """Raised when a peer review status would move backwards."""
    def __init__(self, current: str, requested: str, message: str = ""):
        self.current = current
        self.requested = requested
        self.message = message or f"Cannot move peer review from {current} to {requested}"
        super().__init__(self.message)


class NoDataToExportError(ClassDeskError):
    """Raised when a grade export has no rows."""
    def __init__(self, message: str = "No graded items to export"):
        self.message = message
        super().__init__(self.message)


class OperationFailedError(ClassDeskError):
    """Raised when a persistence or file operation fails."""
    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        self.message = message
        super().__init__(self.message)


_STATUS_CODES = {
    ValidationBlockedError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NoDataToExportError: status.HTTP_404_NOT_FOUND,
    InvalidStatusTransitionError: status.HTTP_409_CONFLICT,
}


def to_http_exception(exc: Exception) -> HTTPException:
    """Map a service exception onto the HTTP error the client sees."""
    if isinstance(exc, HTTPException):
        return exc
    for exc_type, status_code in _STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return HTTPException(status_code=status_code, detail=exc.message)
    # Anything else is reported generically; the cause stays in the log
    logger.error(f"Operation failed: {exc}", exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=GENERIC_FAILURE_MESSAGE,
    )
