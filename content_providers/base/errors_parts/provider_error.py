"""
Structured provider error exception types.

`ProviderError` wraps failures with a normalized `ErrorCode` for consistent
handling and structured logging. The subclasses name the concrete failure
families a content generator surfaces to its caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Key of the provider where the error originated.
        model: Optional model name associated with the failure.
        http_status: HTTP status code when the failure came from a response.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    http_status: Optional[int] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class ProviderHTTPError(ProviderError):
    """Non-2xx response from the provider.

    ``message`` carries the status code and the raw response body text; the
    status is also exposed as ``http_status``.
    """

    body: str = ""


@dataclass
class EmptyResponseBodyError(ProviderError):
    """A streaming call succeeded at the HTTP layer but has no readable body."""


@dataclass
class UnsupportedOperationError(ProviderError):
    """The provider has no endpoint for the requested operation."""

    operation: Optional[str] = None


__all__ = [
    "ProviderError",
    "ProviderHTTPError",
    "EmptyResponseBodyError",
    "UnsupportedOperationError",
]
