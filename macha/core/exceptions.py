"""
Core exception hierarchy for Macha.

Upstream failures are caught at the handler boundary and converted into a
single localized error per resource. Client-side failures are classified by
the dashboard API client into distinct user-facing messages.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class MachaError(Exception):
    """Base exception for all Macha errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MachaError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)


# =============================================================================
# Record Source Errors
# =============================================================================


class NotionQueryError(MachaError):
    """Raised when a Notion database query fails.

    Covers both transport failures and non-2xx responses. For the latter,
    ``status`` and ``code`` mirror Notion's error object.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.status = status
        self.code = code
        super().__init__(message, details)


class RecordSourceError(MachaError):
    """Raised by a normalization handler when its resource could not be loaded.

    ``message`` is the user-facing text; ``cause`` is the underlying
    error message kept for diagnostics.
    """

    def __init__(self, resource: str, message: str, cause: str):
        self.resource = resource
        self.cause = cause
        super().__init__(message, {"resource": resource, "cause": cause})


# =============================================================================
# Dashboard Client Errors
# =============================================================================


class ApiClientError(MachaError):
    """Base exception for dashboard API client failures."""

    pass


class ApiResponseError(ApiClientError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message, {"status_code": status_code})


class ApiRoutingError(ApiResponseError):
    """Raised when a non-success response is an HTML page instead of JSON.

    Usually means the request never reached the API handlers.
    """

    pass


class InvalidJsonError(ApiClientError):
    """Raised when a success response body is not valid JSON."""

    pass


class ApiRequestError(ApiClientError):
    """Raised when the request could not be sent or the response not read."""

    pass
