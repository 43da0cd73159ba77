"""
Normalized generation response DTOs.

`GenerateContentResponse` is produced both by one-shot generation and, once
per delta, by streaming generation. Enum values and camelCase keys are part
of the shared contract and must not change.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from .content import Content


class FinishReason(str, Enum):
    """Why a candidate stopped generating."""

    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    RECITATION = "RECITATION"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Candidate:
    """One generated alternative."""

    content: Content
    finish_reason: Optional[FinishReason] = None
    index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"content": self.content.to_dict(), "index": self.index}
        if self.finish_reason is not None:
            out["finishReason"] = self.finish_reason.value
        return out


@dataclass(frozen=True)
class UsageMetadata:
    """Token accounting reported by the provider."""

    prompt_token_count: Optional[int] = None
    candidates_token_count: Optional[int] = None
    total_token_count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.prompt_token_count is not None:
            out["promptTokenCount"] = self.prompt_token_count
        if self.candidates_token_count is not None:
            out["candidatesTokenCount"] = self.candidates_token_count
        if self.total_token_count is not None:
            out["totalTokenCount"] = self.total_token_count
        return out


@dataclass(frozen=True)
class GenerateContentResponse:
    """Provider-agnostic generation result.

    Attributes:
        candidates: Generated candidates, or ``None`` when the provider
            returned none.
        usage_metadata: Token counts when reported.
    """

    candidates: Optional[List[Candidate]] = None
    usage_metadata: Optional[UsageMetadata] = None

    @property
    def text(self) -> Optional[str]:
        """Concatenated text parts of the first candidate, if any."""
        if not self.candidates:
            return None
        texts = [p.text for p in self.candidates[0].content.parts if p.text is not None]
        return "".join(texts) if texts else None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.candidates is not None:
            out["candidates"] = [c.to_dict() for c in self.candidates]
        if self.usage_metadata is not None:
            out["usageMetadata"] = self.usage_metadata.to_dict()
        return out


__all__ = [
    "FinishReason",
    "Candidate",
    "UsageMetadata",
    "GenerateContentResponse",
]
