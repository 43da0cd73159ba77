"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `content_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    EmptyResponseBodyError,
    ProviderError,
    ProviderHTTPError,
    UnsupportedOperationError,
)
from .classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ProviderHTTPError",
    "EmptyResponseBodyError",
    "UnsupportedOperationError",
    "classify_exception",
    "classify_status",
]
