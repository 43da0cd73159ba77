"""HasDefaultModel Protocol (single-class module).

Optional capability marker for generators bound to a configured model.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasDefaultModel(Protocol):
    """Interface for generators that have a default model."""

    def default_model(self) -> Optional[str]:
        """Return the default model identifier, if available."""
        return None
