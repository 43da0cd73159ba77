"""Streaming metrics data structures.

Isolated within the streaming package to keep the stream normalizer small.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Collected metrics for a single streaming invocation.

    Attributes:
        emitted: Normalized partial responses yielded to the consumer.
        discarded: ``data:`` lines dropped because they were not valid JSON.
        time_to_first_token_ms: Delay between stream start and first emission.
        total_duration_ms: Time from stream start until the response closed.
    """

    emitted: int = 0
    discarded: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["StreamMetrics"]
