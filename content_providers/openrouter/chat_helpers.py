"""Non-streaming response normalization for OpenRouter.

Maps a decoded ``OpenRouterResponse`` onto the provider-agnostic
``GenerateContentResponse``. Only the first choice is consumed.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..base.models import (
    Candidate,
    Content,
    FinishReason,
    GenerateContentResponse,
    Part,
)
from ..base.tokens.extraction import usage_from_chat_completion
from .wire import OpenRouterResponse

_FINISH_REASONS: Dict[str, FinishReason] = {
    "stop": FinishReason.STOP,
    "length": FinishReason.MAX_TOKENS,
    "content_filter": FinishReason.SAFETY,
    "function_call": FinishReason.STOP,
}


def map_finish_reason(reason: Optional[str]) -> FinishReason:
    """Map a wire finish reason; unknown or missing values become ``OTHER``."""
    if not reason:
        return FinishReason.OTHER
    return _FINISH_REASONS.get(reason, FinishReason.OTHER)


def text_candidate(text: str, finish_reason: Optional[FinishReason] = None) -> Candidate:
    """Build the single ``model`` candidate carrying ``text``."""
    return Candidate(
        content=Content(role="model", parts=[Part(text=text)]),
        finish_reason=finish_reason,
        index=0,
    )


def normalize_response(response: OpenRouterResponse) -> GenerateContentResponse:
    """Convert a wire completion into a ``GenerateContentResponse``.

    An empty or missing choice list yields ``candidates=None``; a missing
    usage block yields ``usage_metadata=None``.
    """
    usage = usage_from_chat_completion(response.usage)
    if not response.choices:
        return GenerateContentResponse(candidates=None, usage_metadata=usage)
    choice = response.choices[0]
    candidate = text_candidate(
        choice.message.content or "",
        map_finish_reason(choice.finish_reason),
    )
    return GenerateContentResponse(candidates=[candidate], usage_metadata=usage)


__all__ = ["map_finish_reason", "text_candidate", "normalize_response"]
