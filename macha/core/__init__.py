"""Core infrastructure: exception hierarchy and logging setup."""

from macha.core.exceptions import (
    ApiClientError,
    ApiRequestError,
    ApiResponseError,
    ApiRoutingError,
    ConfigurationError,
    InvalidJsonError,
    MachaError,
    NotionQueryError,
    RecordSourceError,
)
from macha.core.logging import configure_logging

__all__ = [
    "ApiClientError",
    "ApiRequestError",
    "ApiResponseError",
    "ApiRoutingError",
    "ConfigurationError",
    "InvalidJsonError",
    "MachaError",
    "NotionQueryError",
    "RecordSourceError",
    "configure_logging",
]
