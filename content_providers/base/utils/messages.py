"""Text extraction helpers shared across providers.

Helpers here flatten normalized ``Content``/``Part`` values into plain text
for wire formats that only carry strings. They are side-effect free and
operate on provider-agnostic DTOs only.

Compatibility limitation: function calls and function responses are rendered
as bracketed placeholders. Call arguments and response payloads are dropped
and cannot be recovered from the flattened text.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Optional

from ..constants import FUNCTION_CALL_PLACEHOLDER, FUNCTION_RESPONSE_PLACEHOLDER
from ..models import Content, Part


def render_part(part: Part) -> str:
    """Return the text rendering of a single part ('' when it has none)."""
    if part.text:
        return part.text
    if part.function_call is not None:
        return FUNCTION_CALL_PLACEHOLDER.format(name=part.function_call.name)
    if part.function_response is not None:
        return FUNCTION_RESPONSE_PLACEHOLDER
    return ""


def extract_text_from_parts(parts: Optional[Iterable[Part]]) -> str:
    """Render parts and join the non-empty fragments with newlines."""
    return "\n".join(frag for frag in (render_part(p) for p in parts or ()) if frag)


def _text_only(parts: Iterable[Any]) -> str:
    return "\n".join(p.text for p in parts if isinstance(p, Part) and p.text)


def extract_content_text(content: Any) -> str:
    """Flatten a system-instruction-like value to text.

    Accepts a bare string, a ``Content`` or a list of ``Part``; anything else
    yields ``''``. Only text parts contribute (newline-joined); function
    calls, function responses and inline data are ignored here.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, Content):
        return _text_only(content.parts)
    if isinstance(content, list):
        return _text_only(content)
    return ""


def extract_text_from_contents(contents: Any) -> str:
    """Flatten one turn or a list of turns to newline-joined text.

    Each turn contributes its rendered parts (bare strings contribute
    themselves); turns are joined with newlines, keeping empty turns so the
    result mirrors the turn count.
    """
    items: List[Any] = contents if isinstance(contents, list) else [contents]
    texts: List[str] = []
    for item in items:
        if isinstance(item, str):
            texts.append(item)
        elif isinstance(item, Content):
            texts.append(extract_text_from_parts(item.parts))
        else:
            texts.append("")
    return "\n".join(texts)


__all__ = [
    "render_part",
    "extract_text_from_parts",
    "extract_content_text",
    "extract_text_from_contents",
]
