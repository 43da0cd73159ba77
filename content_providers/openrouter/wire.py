"""Pydantic models for the OpenRouter chat-completions wire format.

Purpose
-------
Describe the request body sent to ``POST /chat/completions`` and the
non-streaming and streaming response shapes read back. Response models are
lenient: unknown fields are ignored and optional fields default, so partial
upstream payloads still validate.

External dependencies: Pydantic only.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OpenRouterMessage(_WireModel):
    """One chat message.

    ``role`` is a plain string: unrecognized normalized roles are passed
    through unchanged rather than rejected.
    """

    role: str
    content: Union[str, List[Dict[str, Any]]]


class OpenRouterRequest(_WireModel):
    """Request body for ``/chat/completions``."""

    model: str
    messages: List[OpenRouterMessage]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    stream: Optional[bool] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body, leaving unset sampling fields out entirely."""
        return self.model_dump(exclude_none=True)


class OpenRouterResponseMessage(_WireModel):
    role: Optional[str] = None
    content: Optional[str] = None


class OpenRouterChoice(_WireModel):
    message: OpenRouterResponseMessage = Field(default_factory=OpenRouterResponseMessage)
    finish_reason: Optional[str] = None


class OpenRouterUsage(_WireModel):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class OpenRouterResponse(_WireModel):
    """Non-streaming completion. Only the first choice is consumed."""

    id: Optional[str] = None
    choices: Optional[List[OpenRouterChoice]] = None
    usage: Optional[OpenRouterUsage] = None


class OpenRouterDelta(_WireModel):
    role: Optional[str] = None
    content: Optional[str] = None


class OpenRouterStreamChoice(_WireModel):
    delta: OpenRouterDelta = Field(default_factory=OpenRouterDelta)
    finish_reason: Optional[str] = None


class OpenRouterStreamChunk(_WireModel):
    """One decoded ``data:`` event of a streaming completion."""

    id: Optional[str] = None
    choices: Optional[List[OpenRouterStreamChoice]] = None

    def first_delta_text(self) -> Optional[str]:
        """Return the first choice's text delta, or ``None`` when absent/empty."""
        if not self.choices:
            return None
        return self.choices[0].delta.content or None


__all__ = [
    "OpenRouterMessage",
    "OpenRouterRequest",
    "OpenRouterResponseMessage",
    "OpenRouterChoice",
    "OpenRouterUsage",
    "OpenRouterResponse",
    "OpenRouterDelta",
    "OpenRouterStreamChoice",
    "OpenRouterStreamChunk",
]
