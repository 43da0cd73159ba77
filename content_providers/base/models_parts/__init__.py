"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`content_providers.base.models_parts` if needed, while
`content_providers.base.models` remains the primary stable import path.
"""

from .part import FunctionCall, FunctionResponse, InlineData, Part
from .content import Content, Role
from .generate_request import GenerateContentConfig, GenerateContentParameters
from .generate_response import Candidate, FinishReason, GenerateContentResponse, UsageMetadata
from .count_tokens import CountTokensParameters, CountTokensResponse
from .embed_content import EmbedContentParameters, EmbedContentResponse

__all__ = [
    "FunctionCall",
    "FunctionResponse",
    "InlineData",
    "Part",
    "Content",
    "Role",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "Candidate",
    "FinishReason",
    "GenerateContentResponse",
    "UsageMetadata",
    "CountTokensParameters",
    "CountTokensResponse",
    "EmbedContentParameters",
    "EmbedContentResponse",
]
