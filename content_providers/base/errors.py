"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``content_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    EmptyResponseBodyError,
    ProviderError,
    ProviderHTTPError,
    UnsupportedOperationError,
)
from .errors_parts.classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ProviderHTTPError",
    "EmptyResponseBodyError",
    "UnsupportedOperationError",
    "classify_exception",
    "classify_status",
]
