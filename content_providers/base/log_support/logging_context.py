"""Structured logging context carried by content generator adapters.

:class:`LogContext` holds the fields every adapter event repeats (provider,
model, operation and, once known, the upstream response id). Events extend
it with :meth:`LogContext.bind` instead of mutating a shared instance.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LogContext:
    """Common fields merged into each structured log line."""

    provider: Optional[str] = None
    model: Optional[str] = None
    operation: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **changes: Any) -> "LogContext":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten ``extra`` into the top level and drop ``None`` values."""
        data = asdict(self)
        merged = {k: v for k, v in data.pop("extra").items() if v is not None}
        merged.update({k: v for k, v in data.items() if v is not None})
        return merged


__all__ = ["LogContext"]
