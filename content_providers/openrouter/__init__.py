"""OpenRouter content generator package.

Public surface:
- ``OpenRouterContentGenerator``: the adapter facade.
- ``translate_request`` / ``normalize_response`` / ``iter_stream_responses``:
  the pure translation and normalization steps it composes.
"""

from .chat_helpers import map_finish_reason, normalize_response
from .client import PROVIDER_NAME, OpenRouterContentGenerator
from .helpers import build_headers, translate_request
from .stream_helpers import iter_stream_responses

__all__ = [
    "PROVIDER_NAME",
    "OpenRouterContentGenerator",
    "translate_request",
    "build_headers",
    "normalize_response",
    "map_finish_reason",
    "iter_stream_responses",
]
