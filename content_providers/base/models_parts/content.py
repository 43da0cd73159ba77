"""
Content DTO: one role-tagged conversation turn.

Roles follow the normalized contract: ``"user"``, ``"model"`` and
``"system"``. Adapters map ``"model"`` to their own assistant role.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from .part import Part


Role = Literal["user", "model", "system"]


@dataclass(frozen=True)
class Content:
    """A conversation turn made of ordered parts.

    Attributes:
        role: Author of the turn. Typed as :data:`Role` but not validated;
            adapters decide how to handle unexpected strings.
        parts: Ordered parts of the turn.
    """

    role: Optional[str] = None
    parts: List[Part] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, role: str = "user") -> "Content":
        """Build a single-text-part turn."""
        return cls(role=role, parts=[Part(text=text)])

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"parts": [p.to_dict() for p in self.parts]}
        if self.role is not None:
            out["role"] = self.role
        return out


__all__ = ["Content", "Role"]
