"""content_providers.config.env
============================

Environment variable conventions for provider settings.

Every provider setting maps to ``<PROVIDER>_<SUFFIX>``; the API key for
``openrouter`` is read from ``OPENROUTER_API_KEY`` and its model from
``OPENROUTER_MODEL``.

Failure Modes
-------------
Lookups never raise. Unset and blank values read as absent; so do
placeholder API keys (``changeme``, ``test_...``) so a template ``.env``
cannot shadow a real key from a config file.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

# Config field -> env var suffix
ENV_FIELDS: Dict[str, str] = {
    "api_key": "API_KEY",
    "model": "MODEL",
    "base_url": "BASE_URL",
    "referer": "REFERER",
    "title": "TITLE",
}

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a template value rather than a real one."""
    if val is None:
        return False
    v = str(val).strip().lower()
    return v.startswith("test_") or any(marker in v for marker in _PLACEHOLDER_MARKERS)


def env_var_name(provider: str, field: str) -> Optional[str]:
    """Return the variable name for ``field`` of ``provider`` (None if unknown)."""
    suffix = ENV_FIELDS.get(field)
    if not provider or suffix is None:
        return None
    return f"{provider.strip().upper()}_{suffix}"


def read_env_value(provider: str, field: str) -> Optional[str]:
    name = env_var_name(provider, field)
    if name is None:
        return None
    val = os.environ.get(name)
    if not val or not val.strip():
        return None
    if field == "api_key" and is_placeholder(val):
        return None
    return val.strip()


def read_env_fields(provider: str) -> Dict[str, str]:
    """Return every usable ``<PROVIDER>_*`` setting keyed by config field."""
    out: Dict[str, str] = {}
    for field in ENV_FIELDS:
        val = read_env_value(provider, field)
        if val is not None:
            out[field] = val
    return out


__all__ = [
    "ENV_FIELDS",
    "is_placeholder",
    "env_var_name",
    "read_env_value",
    "read_env_fields",
]
