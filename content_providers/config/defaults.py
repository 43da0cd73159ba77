"""content_providers.config.defaults
=================================

Central place for small, stable default values used across the package.
These defaults can be overridden via environment variables or external
configuration. Only plain constants live here (no I/O, no imports from other
provider packages).
"""

from __future__ import annotations

# ---- OpenRouter ----
# Public endpoint used when no base URL is configured.
OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_DEFAULT_MODEL = "anthropic/claude-3.5-sonnet"
# Static identification headers sent with every request.
OPENROUTER_DEFAULT_REFERER = "https://github.com/content-providers/content-providers"
OPENROUTER_DEFAULT_TITLE = "Content Providers"


__all__ = [
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_REFERER",
    "OPENROUTER_DEFAULT_TITLE",
]
