"""
Shared error handling for fetch-cache.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel, Field

from shared.logging import get_request_id


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class FetchCacheException(Exception):
    """Base exception for fetch-cache."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error response, tagged with the current request ID by default."""
        return ErrorResponse(
            request_id=request_id or get_request_id(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class TransportError(FetchCacheException):
    """Retrieval of a resource failed: network error, bad status or undecodable body."""

    def __init__(
        self,
        resource: str,
        message: str = "Request failed",
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        self.resource = resource
        self.cause = cause
        self.status_code = status_code
        details: Dict[str, Any] = {"resource": resource}
        if status_code is not None:
            details["status_code"] = status_code
        if cause is not None:
            details["cause"] = repr(cause)
        super().__init__("TRANSPORT_ERROR", f"{message} for URL: {resource}", details)
