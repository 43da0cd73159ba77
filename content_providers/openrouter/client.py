"""OpenRouter content generator (OpenAI-style chat completions over HTTP).

Summary:
- Non-stream generation via ``httpx.AsyncClient.post``.
- Streaming via ``client.send(..., stream=True)``; the status is checked
  before the lazy iterator is returned, so HTTP failures surface from the
  awaited call and never from iteration.
- Token counting is estimated locally; embeddings are unsupported.

Timeouts:
- Per-call clients take their ``httpx.Timeout`` from ``base.http`` (driven by
  ``get_timeout_config()``). An injected client keeps its own timeout.

Errors & Observability:
- Non-2xx responses raise ``ProviderHTTPError`` carrying status and body.
- Transport exceptions from httpx propagate unwrapped; they are classified
  with ``classify_exception`` only for the structured error event.
- API keys never appear in log events.

This module orchestrates I/O only; translation and normalization live in
``helpers``, ``chat_helpers`` and ``stream_helpers``.
"""

from __future__ import annotations

import contextlib
import logging
import time
from typing import Any, AsyncIterator, Dict, Optional

import httpx
from pydantic import ValidationError

from ..base.errors import (
    EmptyResponseBodyError,
    ErrorCode,
    ProviderError,
    ProviderHTTPError,
    UnsupportedOperationError,
    classify_exception,
    classify_status,
)
from ..base.http import build_async_client
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)
from ..base.tokens import estimate_tokens
from ..config import get_provider_config, require_api_key
from ..config.defaults import (
    OPENROUTER_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_REFERER,
    OPENROUTER_DEFAULT_TITLE,
)
from .chat_helpers import normalize_response
from .helpers import build_headers, request_summary, translate_request
from .stream_helpers import iter_stream_responses
from .wire import OpenRouterRequest, OpenRouterResponse

PROVIDER_NAME = "openrouter"
CHAT_COMPLETIONS_PATH = "/chat/completions"
_NO_BODY_STATUSES = frozenset((204, 205))


class OpenRouterContentGenerator:
    """Content generator backed by the OpenRouter chat-completions API.

    Parameters:
        api_key: OpenRouter API key, sent as a bearer token.
        model: Model identifier placed in every wire request.
        base_url: API base URL; defaults to ``https://openrouter.ai/api/v1``.
        http_client: Optional long-lived ``httpx.AsyncClient``. When given,
            the adapter uses it for every call and never closes it. When
            omitted, each call builds and closes its own client.
        referer: ``HTTP-Referer`` identification header value.
        title: ``X-Title`` identification header value.

    The configuration is fixed at construction; instances hold no other
    mutable state and can serve concurrent calls.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        referer: Optional[str] = None,
        title: Optional[str] = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url or OPENROUTER_DEFAULT_BASE_URL
        self._http_client = http_client
        self._headers = build_headers(
            api_key,
            referer or OPENROUTER_DEFAULT_REFERER,
            title or OPENROUTER_DEFAULT_TITLE,
        )
        self._logger = get_logger("openrouter")

    @classmethod
    def from_config(
        cls,
        overrides: Optional[Dict[str, Any]] = None,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "OpenRouterContentGenerator":
        """Build a generator from merged provider configuration.

        Raises:
            ProviderError: ``code=auth`` when no API key is configured. No
                network activity happens before this check.
        """
        cfg = get_provider_config(PROVIDER_NAME, overrides)
        api_key = require_api_key(PROVIDER_NAME, cfg)
        return cls(
            api_key,
            cfg["model"],
            cfg.get("base_url"),
            http_client=http_client,
            referer=cfg.get("referer"),
            title=cfg.get("title"),
        )

    @property
    def provider_name(self) -> str:
        """Return the canonical provider slug used in logs and errors."""
        return PROVIDER_NAME

    @property
    def model(self) -> str:
        return self._model

    @property
    def base_url(self) -> str:
        return self._base_url

    def default_model(self) -> Optional[str]:
        return self._model

    # ---- internals ----
    @property
    def _endpoint(self) -> str:
        return f"{self._base_url.rstrip('/')}{CHAT_COMPLETIONS_PATH}"

    def _ctx(self, operation: str) -> LogContext:
        return LogContext(provider=PROVIDER_NAME, model=self._model, operation=operation)

    @contextlib.asynccontextmanager
    async def _client_scope(self, purpose: str) -> AsyncIterator[httpx.AsyncClient]:
        """Yield the injected client, or a per-call client closed on exit."""
        if self._http_client is not None:
            yield self._http_client
            return
        client = build_async_client(None, purpose)
        try:
            yield client
        finally:
            await client.aclose()

    def _http_error(self, status: int, body: str) -> ProviderHTTPError:
        return ProviderHTTPError(
            code=classify_status(status),
            message=f"OpenRouter API error: {status} - {body}",
            provider=PROVIDER_NAME,
            model=self._model,
            http_status=status,
            retryable=False,
            body=body,
        )

    def _log_start(self, event: str, ctx: LogContext, wire: OpenRouterRequest) -> None:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="start",
            emitted=False,
            tokens=None,
            **request_summary(wire),
        )

    def _log_error(self, event: str, ctx: LogContext, exc: Exception) -> None:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="finalize",
            error_code=classify_exception(exc).value,
            emitted=False,
            tokens=None,
            level=logging.ERROR,
            error=str(exc),
            http_status=getattr(exc, "http_status", None),
        )

    # ---- operations ----
    async def generate_content(self, request: GenerateContentParameters) -> GenerateContentResponse:
        """Perform one non-streaming completion.

        Raises:
            ProviderHTTPError: Non-2xx response; the message embeds the
                status and the raw body text.
            ProviderError: A 2xx response whose body is not a completion.
            httpx.TransportError: Network failures, unwrapped.
        """
        ctx = self._ctx("generate_content")
        wire = translate_request(request, self._model, logger=self._logger, ctx=ctx)
        self._log_start("generate.start", ctx, wire)
        started = time.perf_counter()
        try:
            async with self._client_scope("chat") as client:
                response = await client.post(self._endpoint, headers=self._headers, json=wire.to_payload())
            if not response.is_success:
                raise self._http_error(response.status_code, response.text)
            try:
                body = OpenRouterResponse.model_validate(response.json())
            except (ValueError, ValidationError) as exc:
                raise ProviderError(
                    code=ErrorCode.INTERNAL,
                    message=f"OpenRouter returned an unreadable completion: {exc}",
                    provider=PROVIDER_NAME,
                    model=self._model,
                    http_status=response.status_code,
                    raw=exc,
                ) from exc
        except (ProviderError, httpx.HTTPError) as exc:
            self._log_error("generate.error", ctx, exc)
            raise
        result = normalize_response(body)
        normalized_log_event(
            self._logger,
            "generate.end",
            ctx.bind(response_id=body.id),
            phase="finalize",
            emitted=bool(result.candidates),
            tokens=result.usage_metadata,
            latency_ms=round((time.perf_counter() - started) * 1000.0, 3),
        )
        return result

    async def generate_content_stream(
        self, request: GenerateContentParameters
    ) -> AsyncIterator[GenerateContentResponse]:
        """Start a streaming completion.

        Awaiting this method sends the request and validates the response
        status; the returned async iterator then yields one partial response
        per text delta. The underlying response is closed when the iterator
        is exhausted, closed early (``aclose()``), or fails.

        Raises:
            ProviderHTTPError: Non-2xx response (raised before any data is read).
            EmptyResponseBodyError: The response carries no body to stream.
            httpx.TransportError: Network failures while connecting, unwrapped.
        """
        ctx = self._ctx("generate_content_stream")
        wire = translate_request(request, self._model, stream=True, logger=self._logger, ctx=ctx)
        self._log_start("stream.start", ctx, wire)
        client = self._http_client if self._http_client is not None else build_async_client(None, "stream")
        owned_client = client if self._http_client is None else None
        response: Optional[httpx.Response] = None
        try:
            http_request = client.build_request(
                "POST", self._endpoint, headers=self._headers, json=wire.to_payload()
            )
            response = await client.send(http_request, stream=True)
            if not response.is_success:
                await response.aread()
                raise self._http_error(response.status_code, response.text)
            if response.status_code in _NO_BODY_STATUSES or response.stream is None:
                raise EmptyResponseBodyError(
                    code=ErrorCode.EMPTY_BODY,
                    message="Response body is null",
                    provider=PROVIDER_NAME,
                    model=self._model,
                    http_status=response.status_code,
                )
        except BaseException as exc:
            if isinstance(exc, (ProviderError, httpx.HTTPError)):
                self._log_error("stream.error", ctx, exc)
            try:
                if response is not None:
                    await response.aclose()
            finally:
                if owned_client is not None:
                    await owned_client.aclose()
            raise
        return iter_stream_responses(response, logger=self._logger, ctx=ctx, owned_client=owned_client)

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Estimate the token count of ``request.contents`` locally.

        OpenRouter exposes no counting endpoint; the estimate is
        ``ceil(characters / 4)`` over the flattened text. No network I/O.
        """
        total = estimate_tokens(request.contents)
        log_event(
            self._logger, "count_tokens", self._ctx("count_tokens"), level=logging.DEBUG, total_tokens=total, estimated=True
        )
        return CountTokensResponse(total_tokens=total)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        """Always raises ``UnsupportedOperationError``; no request is sent."""
        ctx = self._ctx("embed_content")
        log_event(self._logger, "embed.unsupported", ctx, level=logging.WARNING)
        raise UnsupportedOperationError(
            code=ErrorCode.UNSUPPORTED,
            message="OpenRouter does not support content embedding",
            provider=PROVIDER_NAME,
            model=self._model,
            operation="embed_content",
        )


__all__ = ["OpenRouterContentGenerator", "PROVIDER_NAME"]
