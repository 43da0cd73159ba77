"""
Embedding request/response DTOs.

Kept in the shared contract even though not every provider can serve them;
adapters without an embedding endpoint raise ``UnsupportedOperationError``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .generate_request import ContentListUnion, _contents_to_list


@dataclass(frozen=True)
class EmbedContentParameters:
    model: str
    contents: ContentListUnion

    def to_dict(self) -> Dict[str, Any]:
        return {"model": self.model, "contents": _contents_to_list(self.contents)}


@dataclass(frozen=True)
class EmbedContentResponse:
    """One embedding vector per input content."""

    embeddings: List[List[float]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"embeddings": [{"values": list(v)} for v in self.embeddings]}


__all__ = ["EmbedContentParameters", "EmbedContentResponse"]
