"""Request translation for the OpenRouter provider.

Converts normalized ``GenerateContentParameters`` into the chat-completions
wire request and builds the HTTP headers. Everything here is pure: no I/O.

Compatibility limitation: the chat-completions schema used here carries
message content as plain text, so function-call and function-response parts
are rendered as bracketed placeholders (see ``base.utils.messages``) and
inline images are dropped.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..base.logging import LogContext, log_event
from ..base.models import Content, GenerateContentParameters
from ..base.utils.messages import extract_content_text, extract_text_from_parts
from .wire import OpenRouterMessage, OpenRouterRequest

_KNOWN_ROLES = frozenset(("user", "model", "system"))


def map_role(role: Optional[str]) -> str:
    """Map a normalized role to a wire role.

    ``model`` becomes ``assistant``; every other value (including unexpected
    strings) passes through unchanged. A missing role defaults to ``user``.
    """
    if role == "model":
        return "assistant"
    return role or "user"


def translate_request(
    params: GenerateContentParameters,
    model: str,
    *,
    stream: bool = False,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> OpenRouterRequest:
    """Translate a normalized request into an ``OpenRouterRequest``.

    Parameters:
        params: Normalized request (contents, optional config).
        model: Wire model identifier (the adapter's configured model).
        stream: Value of the wire ``stream`` flag; ``False`` leaves it unset.
        logger: Optional logger for ``request.unknown_role`` debug events.
        ctx: Log context for those events.

    Returns:
        The wire request. Turn order is preserved; a system instruction, when
        present, becomes the first message.
    """
    messages: List[OpenRouterMessage] = []
    config = params.config

    if config is not None and config.system_instruction:
        messages.append(
            OpenRouterMessage(role="system", content=extract_content_text(config.system_instruction))
        )

    contents = params.contents if isinstance(params.contents, list) else [params.contents]
    for turn in contents:
        if isinstance(turn, str):
            messages.append(OpenRouterMessage(role="user", content=turn))
            continue
        if not isinstance(turn, Content):
            continue
        if turn.role is not None and turn.role not in _KNOWN_ROLES and logger is not None:
            log_event(logger, "request.unknown_role", ctx, level=logging.DEBUG, role=turn.role)
        messages.append(
            OpenRouterMessage(role=map_role(turn.role), content=extract_text_from_parts(turn.parts))
        )

    return OpenRouterRequest(
        model=model,
        messages=messages,
        temperature=config.temperature if config else None,
        max_tokens=config.max_output_tokens if config else None,
        top_p=config.top_p if config else None,
        stream=True if stream else None,
    )


def build_headers(api_key: Optional[str], referer: str, title: str) -> Dict[str, str]:
    """Build request headers: bearer auth, JSON content type, identification."""
    headers: Dict[str, str] = {
        "Content-Type": "application/json",
        "HTTP-Referer": referer,
        "X-Title": title,
    }
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def request_summary(request: OpenRouterRequest) -> Dict[str, Any]:
    """Return loggable request facts (no message content, no credentials)."""
    return {
        "messages": len(request.messages),
        "temperature": request.temperature,
        "max_tokens": request.max_tokens,
        "top_p": request.top_p,
    }


__all__ = ["map_role", "translate_request", "build_headers", "request_summary"]
