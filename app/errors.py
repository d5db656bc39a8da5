"""
app/errors.py

Request-level failures surfaced as a single top-level error response.

Row-level problems never use these classes; they are collected into the
batch summary instead.
"""

from __future__ import annotations


class RequestProcessingError(Exception):
    """Base exception for failures that stop a request from running at all."""


class MalformedPayloadError(RequestProcessingError):
    """Raised when the request body is not valid JSON or misses required keys."""


class EmptyInputError(RequestProcessingError):
    """Raised when delimited text contains no lines after trimming."""

    def __init__(self, message: str = "CSV data is empty.") -> None:
        super().__init__(message)


class PersistenceUnavailableError(RequestProcessingError):
    """Raised when the backing store cannot be reached mid-batch."""


class SearchConfigurationError(RequestProcessingError):
    """Raised when the language-model adapter is not configured."""


class SearchServiceError(RequestProcessingError):
    """Raised when the hosted language-model call fails or times out."""
