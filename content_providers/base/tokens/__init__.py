"""Token accounting helpers package."""

from .estimation import estimate_tokens, estimate_tokens_for_text
from .extraction import usage_from_chat_completion

__all__ = [
    "estimate_tokens",
    "estimate_tokens_for_text",
    "usage_from_chat_completion",
]
