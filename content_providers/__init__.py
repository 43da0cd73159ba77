"""content_providers package

Provider-agnostic content generation contract plus the OpenRouter adapter.

Purpose:
    Let application code talk to one ``ContentGenerator`` interface
    (generate, stream, count tokens, embed) while the OpenRouter
    chat-completions wire format stays behind the adapter.

Public API (re-exported):
    - Version: ``__version__``
    - Contract: :class:`ContentGenerator` and the normalized DTOs
    - Exceptions: :class:`ProviderError` and its subclasses, :class:`ErrorCode`
    - Adapter: :class:`OpenRouterContentGenerator`
"""

from .base import (
    Candidate,
    Content,
    ContentGenerator,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    EmptyResponseBodyError,
    ErrorCode,
    FinishReason,
    FunctionCall,
    FunctionResponse,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    Part,
    ProviderError,
    ProviderHTTPError,
    UnsupportedOperationError,
    UsageMetadata,
)
from .openrouter import OpenRouterContentGenerator

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ContentGenerator",
    "Content",
    "Part",
    "FunctionCall",
    "FunctionResponse",
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
    "ErrorCode",
    "ProviderError",
    "ProviderHTTPError",
    "EmptyResponseBodyError",
    "UnsupportedOperationError",
    "OpenRouterContentGenerator",
]
