"""Async HTTP client construction for provider adapters.

Purpose:
    Build ``httpx.AsyncClient`` instances whose timeouts derive exclusively
    from :func:`get_timeout_config`, so no adapter introduces ad-hoc numeric
    literals.

Lifecycle & cleanup:
    Clients are not pooled. Each call that does not receive an injected client
    builds one and closes it when the call (or the stream it backs) ends, so
    concurrent calls share no mutable state. Callers wanting connection reuse
    inject their own long-lived client into the adapter instead.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..timeouts import get_timeout_config


def build_timeout(purpose: str) -> httpx.Timeout:
    """Return the ``httpx.Timeout`` for a call purpose (``"chat"`` or ``"stream"``)."""
    cfg = get_timeout_config()
    read = cfg.stream_timeout_seconds if purpose == "stream" else cfg.http_timeout_seconds
    return httpx.Timeout(read, connect=cfg.connect_timeout_seconds)


def build_async_client(
    base_url: Optional[str],
    purpose: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` configured for ``purpose``.

    Parameters:
        base_url: Optional API base URL so callers can issue relative requests.
        purpose: ``"chat"`` or ``"stream"``; selects the read timeout.
        transport: Optional transport override (tests, proxies).

    Returns:
        A new client the caller is responsible for closing.
    """
    kwargs = {"timeout": build_timeout(purpose)}
    if base_url:
        kwargs["base_url"] = base_url
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


__all__ = ["build_async_client", "build_timeout"]
