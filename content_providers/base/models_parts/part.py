"""
Content part model for normalized conversation turns.

A `Part` carries exactly one kind of payload: plain text, a function call
issued by the model, a function response returned by the caller, or inline
binary data (images). Serialization uses the contract's camelCase keys.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FunctionCall:
    """A function invocation requested by the model."""

    name: Optional[str] = None
    args: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "args": dict(self.args)}


@dataclass(frozen=True)
class FunctionResponse:
    """The result of a function call, sent back to the model."""

    name: Optional[str] = None
    response: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "response": dict(self.response)}


@dataclass(frozen=True)
class InlineData:
    """Inline binary payload (e.g. an image) as base64 text plus MIME type."""

    mime_type: str
    data: str

    def to_dict(self) -> Dict[str, Any]:
        return {"mimeType": self.mime_type, "data": self.data}


@dataclass(frozen=True)
class Part:
    """A single piece of a conversation turn.

    Attributes:
        text: Plain text content.
        function_call: Function call requested by the model.
        function_response: Function result supplied by the caller.
        inline_data: Binary payload such as an image.

    Methods:
        to_dict: Return the camelCase dictionary form, omitting unset fields.
    """

    text: Optional[str] = None
    function_call: Optional[FunctionCall] = None
    function_response: Optional[FunctionResponse] = None
    inline_data: Optional[InlineData] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the part."""
        out: Dict[str, Any] = {}
        if self.text is not None:
            out["text"] = self.text
        if self.function_call is not None:
            out["functionCall"] = self.function_call.to_dict()
        if self.function_response is not None:
            out["functionResponse"] = self.function_response.to_dict()
        if self.inline_data is not None:
            out["inlineData"] = self.inline_data.to_dict()
        return out


__all__ = ["FunctionCall", "FunctionResponse", "InlineData", "Part"]
