"""ContentGenerator Protocol (single-class module).

Defines the capability contract shared by every content generation backend.
Backends satisfy it structurally; none of them inherit from it.
"""

from __future__ import annotations

from typing import AsyncIterator, Protocol, runtime_checkable

from ..models import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)


@runtime_checkable
class ContentGenerator(Protocol):
    """Provider-agnostic content generation interface.

    Implementations map ``GenerateContentParameters`` to their wire format,
    normalize results to ``GenerateContentResponse``, and never leak wire or
    SDK objects upstream. Failures are raised as ``ProviderError`` subclasses.
    """

    async def generate_content(self, request: GenerateContentParameters) -> GenerateContentResponse:
        """Execute a single, non-streaming generation."""
        ...

    async def generate_content_stream(
        self, request: GenerateContentParameters
    ) -> AsyncIterator[GenerateContentResponse]:
        """Start a streaming generation.

        Awaiting the call performs the request and surfaces HTTP-level errors;
        the returned iterator then yields one partial response per delta.
        """
        ...

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Return the (possibly estimated) token count of ``request.contents``."""
        ...

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        """Return embeddings for ``request.contents``."""
        ...
