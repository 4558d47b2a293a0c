"""Exception hierarchy for the contacts service."""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import status


class ApplicationError(Exception):
    """Error carrying an HTTP status and a message that is safe to show clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> Dict[str, str]:
        return {"error": self.message, "code": self.code}


class ValidationError(ApplicationError):
    code = "validation_error"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Not found"


class ConflictError(ApplicationError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_message = "Conflict"


class StoreError(ApplicationError):
    """Unexpected failure talking to the document store.

    The client-facing message is always generic; the underlying driver error
    is logged where it is caught and chained as ``__cause__``.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "store_error"
    default_message = "Server error"


class StoreConnectionError(StoreError, ConnectionError):
    """Raised when the configured store address is malformed or unreachable."""

    code = "store_unavailable"


class UninitializedError(RuntimeError):
    """Raised when the store handle is requested before `connect()`."""
