"""Custom error classes for OpenDota API client."""

from typing import Optional, Dict, Any


class OpenDotaAPIError(Exception):
    """Base exception for OpenDota API errors with status code tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        """
        Initialize OpenDotaAPIError.

        Args:
            message: Error message
            status_code: HTTP status code (400, 404, 429, 503, etc.)
            response_data: Raw response data from API
            retry_after: Seconds to wait before retry (for 429 errors)
        """
        super().__init__(message)
        self.status_code: Optional[int] = status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.retry_after: Optional[float] = retry_after
        self.message: str = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code == 429 and self.retry_after:
            return f"Rate Limit Error {self.status_code}: {self.message} (Retry after: {self.retry_after}s)"
        if self.status_code:
            return f"OpenDota API Error {self.status_code}: {self.message}"
        return f"OpenDota API Error: {self.message}"

    def is_not_found(self) -> bool:
        """Check if this is a not found error (404)."""
        return self.status_code == 404

    def is_server_error(self) -> bool:
        """Check if this is a server error (5xx)."""
        return self.status_code is not None and self.status_code >= 500


class RateLimitError(OpenDotaAPIError):
    """Rate limit error (429) - can be retried after cooldown."""

    pass


class NotFoundError(OpenDotaAPIError):
    """Not found error (404) - resource doesn't exist."""

    pass


class ServiceUnavailableError(OpenDotaAPIError):
    """Service unavailable (503) - OpenDota servers down."""

    pass


class BadRequestError(OpenDotaAPIError):
    """Bad request (400) - invalid parameters."""

    pass


class ResponseParseError(OpenDotaAPIError):
    """Response body did not match the expected shape."""

    pass
