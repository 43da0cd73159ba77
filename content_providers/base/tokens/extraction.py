"""Token usage extraction helpers.

Maps chat-completions usage blocks (``prompt_tokens``, ``completion_tokens``,
``total_tokens``) onto the normalized :class:`UsageMetadata`. Counts are
copied verbatim; nothing is derived or recomputed.

Accepts both mapping-style payloads (decoded JSON) and attribute objects
(wire models). A missing usage block yields ``None`` so callers can leave the
usage metadata unset.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models import UsageMetadata


def _read(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def usage_from_chat_completion(usage: Any) -> Optional[UsageMetadata]:
    """Return ``UsageMetadata`` for a chat-completions usage block, or ``None``."""
    if usage is None:
        return None
    return UsageMetadata(
        prompt_token_count=_read(usage, "prompt_tokens"),
        candidates_token_count=_read(usage, "completion_tokens"),
        total_token_count=_read(usage, "total_tokens"),
    )


__all__ = ["usage_from_chat_completion"]
