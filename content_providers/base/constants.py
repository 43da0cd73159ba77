"""Base shared constants for content generator adapters.

Central location to avoid scattering magic strings and policy numbers.
"""
from __future__ import annotations

# Token estimation policy: characters per estimated token. Changing this
# changes every estimate reported by count_tokens and needs a compatibility note.
CHARS_PER_TOKEN = 4

# Server-sent events framing
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"

# Placeholders rendered for parts the chat-completions schema cannot carry.
FUNCTION_CALL_PLACEHOLDER = "[Function Call: {name}]"
FUNCTION_RESPONSE_PLACEHOLDER = "[Function Response]"

__all__ = [
    "CHARS_PER_TOKEN",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "FUNCTION_CALL_PLACEHOLDER",
    "FUNCTION_RESPONSE_PLACEHOLDER",
]
