"""
Normalized generation request DTOs.

`GenerateContentParameters` is what every content generator receives:
the target model, the conversation contents, and an optional
`GenerateContentConfig` with the system instruction and sampling parameters.
Unset sampling fields stay ``None`` so adapters can leave them to the
provider's defaults.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .content import Content
from .part import Part

# A single turn may be given as a bare string (treated as user text).
ContentUnion = Union[str, Content]
ContentListUnion = Union[ContentUnion, List[ContentUnion]]
SystemInstruction = Union[str, Content, List[Part]]


def _contents_to_list(contents: ContentListUnion) -> List[Any]:
    items = contents if isinstance(contents, list) else [contents]
    return [c if isinstance(c, str) else c.to_dict() for c in items]


@dataclass(frozen=True)
class GenerateContentConfig:
    """Optional generation settings.

    Attributes:
        system_instruction: Instruction text, turn, or list of parts.
        temperature: Sampling temperature.
        max_output_tokens: Upper bound for generated tokens.
        top_p: Nucleus sampling probability.
    """

    system_instruction: Optional[SystemInstruction] = None
    temperature: Optional[float] = None
    max_output_tokens: Optional[int] = None
    top_p: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        si = self.system_instruction
        if isinstance(si, str):
            out["systemInstruction"] = si
        elif isinstance(si, Content):
            out["systemInstruction"] = si.to_dict()
        elif si is not None:
            out["systemInstruction"] = [p.to_dict() for p in si]
        if self.temperature is not None:
            out["temperature"] = self.temperature
        if self.max_output_tokens is not None:
            out["maxOutputTokens"] = self.max_output_tokens
        if self.top_p is not None:
            out["topP"] = self.top_p
        return out


@dataclass(frozen=True)
class GenerateContentParameters:
    """Normalized request passed to ``generate_content`` and its stream variant."""

    model: str
    contents: ContentListUnion
    config: Optional[GenerateContentConfig] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"model": self.model, "contents": _contents_to_list(self.contents)}
        if self.config is not None:
            out["config"] = self.config.to_dict()
        return out


__all__ = [
    "ContentUnion",
    "ContentListUnion",
    "SystemInstruction",
    "GenerateContentConfig",
    "GenerateContentParameters",
]
