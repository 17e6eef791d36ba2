"""
Mapbox Client Exceptions

This module contains custom exception classes for handling Mapbox API errors,
client-side validation failures and response decoding problems.
"""

import logging
from typing import Any, Dict, Optional, Self

logger = logging.getLogger(__name__)


class MapboxError(Exception):
    """Base exception class for all Mapbox client errors, dood!

    All other exceptions in this module inherit from this base class.

    Attributes:
        message: Human-readable error message
        code: API error code (if available)
        response: Raw API error envelope (if available)
        endpoint: Name of the endpoint call that failed (set by service facades)
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
        endpoint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.response = response
        self.endpoint = endpoint
        logger.debug(f"{type(self).__name__}: {message} (code: {code})")

    def withEndpoint(self, endpoint: str) -> Self:
        """Attach the failing endpoint name and return self for re-raising."""
        self.endpoint = endpoint
        return self

    def _describe(self) -> str:
        if self.code:
            return f"mapbox: {self.message} ({self.code})"
        return f"mapbox: {self.message}"

    def __str__(self) -> str:
        if self.endpoint:
            return f"{self.endpoint} failed: {self._describe()}"
        return self._describe()


class ConfigurationError(MapboxError):
    """Raised when the client is misconfigured.

    This occurs when the access token is missing or empty, or when the
    configuration file cannot be read.
    """

    def __init__(self, message: str, code: Optional[str] = None, response: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code, response)


class ValidationError(MapboxError):
    """Raised when request validation fails before any network call.

    Attributes:
        field: Name of the offending request field (if applicable)
        index: Position of the offending entry in a batch (if applicable)
    """

    def __init__(self, message: str, field: Optional[str] = None, index: Optional[int] = None) -> None:
        self.field = field
        self.index = index
        if index is not None:
            message = f"query at index {index}: {message}"
        super().__init__(message)


class ApiError(MapboxError):
    """Raised when the API returns a non-2xx response.

    This is the generic class for status codes that don't fit into a more
    specific category, and the parent of all classified API errors.

    Attributes:
        statusCode: HTTP status code of the response
    """

    def __init__(
        self,
        message: str,
        statusCode: int,
        code: Optional[str] = None,
        response: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.statusCode = statusCode
        super().__init__(message, code, response)

    def _describe(self) -> str:
        if self.code:
            return f"HTTP {self.statusCode}: {self.message} ({self.code})"
        return f"HTTP {self.statusCode}: {self.message}"


class InvalidTokenError(ApiError):
    """Raised on 401/403: the access token is invalid, missing or lacks the required scope."""


class NotFoundError(ApiError):
    """Raised on 404: the requested resource doesn't exist."""


class InvalidRequestError(ApiError):
    """Raised on 422: the API rejected the request parameters."""


class RateLimitError(ApiError):
    """Raised on 429: the account's rate limit was exceeded.

    The client never retries on its own, callers should back off.
    """


class ServerError(ApiError):
    """Raised on 5xx: the API failed to process the request."""


class DecodeError(MapboxError):
    """Raised when a successful response body doesn't decode into the declared shape."""

    def __init__(self, message: str, statusCode: Optional[int] = None) -> None:
        self.statusCode = statusCode
        super().__init__(message)


class NetworkError(MapboxError):
    """Raised when the HTTP engine fails to complete the request.

    The original httpx exception is available as ``__cause__``.
    """

    def __init__(self, message: str = "Network error occurred.", endpoint: Optional[str] = None) -> None:
        super().__init__(message, endpoint=endpoint)


def classifyApiError(
    statusCode: int,
    message: str,
    code: Optional[str] = None,
    response: Optional[Dict[str, Any]] = None,
) -> ApiError:
    """Map an HTTP status code to the appropriate API exception.

    Args:
        statusCode: HTTP status code
        message: Error message from the envelope or the status line
        code: API error code from the envelope (if any)
        response: Raw error envelope (if any)

    Returns:
        ApiError subclass instance matching the status code

    Example:
        >>> error = classifyApiError(429, "Rate limit exceeded", "RATE_LIMIT_EXCEEDED")
        >>> isinstance(error, RateLimitError)
        True
    """
    errorClass: type[ApiError] = ApiError
    if statusCode in (401, 403):
        errorClass = InvalidTokenError
    elif statusCode == 404:
        errorClass = NotFoundError
    elif statusCode == 422:
        errorClass = InvalidRequestError
    elif statusCode == 429:
        errorClass = RateLimitError
    elif 500 <= statusCode < 600:
        errorClass = ServerError

    return errorClass(message, statusCode, code, response)
