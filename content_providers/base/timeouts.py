"""Unified timeout values for provider HTTP clients.

Adapters do not enforce deadlines themselves; deadlines are layered onto the
transport through the ``httpx`` client timeout built from this configuration.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values (seconds).

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and again only when they change. Supported variables (all
    optional):
        PT_TIMEOUT_CONNECT_SECONDS
        PT_TIMEOUT_STREAM_SECONDS
        PT_TIMEOUT_HTTP_SECONDS
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_ENV_NAMES = (
    "PT_TIMEOUT_CONNECT_SECONDS",
    "PT_TIMEOUT_STREAM_SECONDS",
    "PT_TIMEOUT_HTTP_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Timeout for establishing the connection.
        stream_timeout_seconds: Idle read timeout between streamed chunks.
        http_timeout_seconds: Read timeout for non-streaming requests.
    """

    connect_timeout_seconds: float = 10.0
    stream_timeout_seconds: float = 60.0
    http_timeout_seconds: float = 120.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, else return ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`, refreshed when env changes."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", defaults.connect_timeout_seconds),
        stream_timeout_seconds=_parse_env_float("PT_TIMEOUT_STREAM_SECONDS", defaults.stream_timeout_seconds),
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", defaults.http_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
