"""
Providers Base Package

Exports provider-agnostic contracts, DTOs and shared infrastructure for
content generator adapters:
- Interfaces: the ``ContentGenerator`` capability contract
- Models (DTOs): normalized request/response objects
- Errors: normalized error taxonomy
- Streaming/tokens: SSE framing and token estimation helpers
"""

from .errors import (
    EmptyResponseBodyError,
    ErrorCode,
    ProviderError,
    ProviderHTTPError,
    UnsupportedOperationError,
    classify_exception,
)
from .interfaces import ContentGenerator, HasDefaultModel
from .models import (
    Candidate,
    Content,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    FinishReason,
    FunctionCall,
    FunctionResponse,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    InlineData,
    Part,
    Role,
    UsageMetadata,
)
from .timeouts import TimeoutConfig, get_timeout_config
from .streaming import SSELineBuffer, StreamMetrics, StreamState
from .tokens import estimate_tokens

__all__ = [
    # Models
    "Role",
    "Part",
    "FunctionCall",
    "FunctionResponse",
    "InlineData",
    "Content",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "Candidate",
    "FinishReason",
    "UsageMetadata",
    "CountTokensParameters",
    "CountTokensResponse",
    "EmbedContentParameters",
    "EmbedContentResponse",
    # Interfaces
    "ContentGenerator",
    "HasDefaultModel",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ProviderHTTPError",
    "EmptyResponseBodyError",
    "UnsupportedOperationError",
    "classify_exception",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
    # Streaming & tokens
    "SSELineBuffer",
    "StreamState",
    "StreamMetrics",
    "estimate_tokens",
]
