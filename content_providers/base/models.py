"""
Provider-agnostic content generation models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``content_providers.base.models_parts``. These shapes are the shared contract
every content generator consumes and produces; field names and enum values
are fixed.
"""

from .models_parts.part import FunctionCall, FunctionResponse, InlineData, Part
from .models_parts.content import Content, Role
from .models_parts.generate_request import (
    ContentListUnion,
    ContentUnion,
    GenerateContentConfig,
    GenerateContentParameters,
    SystemInstruction,
)
from .models_parts.generate_response import (
    Candidate,
    FinishReason,
    GenerateContentResponse,
    UsageMetadata,
)
from .models_parts.count_tokens import CountTokensParameters, CountTokensResponse
from .models_parts.embed_content import EmbedContentParameters, EmbedContentResponse

__all__ = [
    "FunctionCall",
    "FunctionResponse",
    "InlineData",
    "Part",
    "Content",
    "Role",
    "ContentUnion",
    "ContentListUnion",
    "SystemInstruction",
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
