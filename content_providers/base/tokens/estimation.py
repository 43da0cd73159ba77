"""Approximate token counting.

Providers without a counting endpoint report ``ceil(chars / CHARS_PER_TOKEN)``
over the flattened text of the request contents. This is an estimate, not a
tokenizer; the divisor is policy defined in ``base.constants``.
"""

from __future__ import annotations

import math
from typing import Any

from ..constants import CHARS_PER_TOKEN
from ..utils.messages import extract_text_from_contents


def estimate_tokens_for_text(text: str) -> int:
    """Return the estimated token count of ``text`` (0 for empty text)."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


def estimate_tokens(contents: Any) -> int:
    """Return the estimated token count of one turn or a list of turns.

    Never raises; unrecognized values contribute no text.
    """
    return estimate_tokens_for_text(extract_text_from_contents(contents))


__all__ = ["estimate_tokens", "estimate_tokens_for_text"]
