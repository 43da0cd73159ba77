"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, base URLs, identification headers).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. OPENROUTER_MODEL, OPENROUTER_API_KEY)
    4. In-code overrides passed to the helper
* Keep zero hard dependency on PyYAML (YAML is read only if it is installed).

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_API_KEY, <PROVIDER>_BASE_URL,
<PROVIDER>_REFERER, <PROVIDER>_TITLE; e.g. OPENROUTER_BASE_URL.

External Config File (Optional)
-------------------------------
```
openrouter:
  model: anthropic/claude-3.5-sonnet
  base_url: https://openrouter.ai/api/v1
  title: My Tool
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* require_api_key(provider: str, cfg: dict) -> str
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..base.errors import ErrorCode, ProviderError
from .defaults import (
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_MODEL,
    OPENROUTER_DEFAULT_REFERER,
    OPENROUTER_DEFAULT_TITLE,
)
from .env import read_env_fields

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openrouter": {
        "model": OPENROUTER_DEFAULT_MODEL,
        "base_url": OPENROUTER_DEFAULT_BASE_URL,
        "referer": OPENROUTER_DEFAULT_REFERER,
        "title": OPENROUTER_DEFAULT_TITLE,
    },
}


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the PROVIDERS_CONFIG_FILE mapping ({} when absent/invalid)."""
    global _FILE_CACHE  # noqa: PLW0603 - documented module cache
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any = {}
    try:
        data = json.loads(text)
    except ValueError:
        if yaml is not None:
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError:
                data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached external config file (tests, config reloads)."""
    global _FILE_CACHE  # noqa: PLW0603
    _FILE_CACHE = None


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}
    cfg |= DEFAULTS.get(name, {})
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg
    cfg |= read_env_fields(name)
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def require_api_key(provider: str, cfg: Dict[str, Any]) -> str:
    """Return ``cfg["api_key"]`` or raise a configuration ``ProviderError``.

    Called before any network activity so a missing credential never reaches
    the adapter.
    """
    api_key = cfg.get("api_key")
    if not api_key:
        raise ProviderError(
            code=ErrorCode.AUTH,
            message=f"{provider} API key is required",
            provider=provider,
            model=cfg.get("model"),
        )
    return str(api_key)


__all__ = [
    "DEFAULTS",
    "get_provider_config",
    "require_api_key",
    "reset_config_cache",
]
