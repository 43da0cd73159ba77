"""
Token counting request/response DTOs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .generate_request import ContentListUnion, _contents_to_list


@dataclass(frozen=True)
class CountTokensParameters:
    """Contents whose token count should be reported for ``model``."""

    model: str
    contents: ContentListUnion

    def to_dict(self) -> Dict[str, Any]:
        return {"model": self.model, "contents": _contents_to_list(self.contents)}


@dataclass(frozen=True)
class CountTokensResponse:
    total_tokens: int

    def to_dict(self) -> Dict[str, Any]:
        return {"totalTokens": self.total_tokens}


__all__ = ["CountTokensParameters", "CountTokensResponse"]
