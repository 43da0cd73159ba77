"""Streaming body normalization for the OpenRouter provider.

Purpose:
- Turn the server-sent events body of a streaming completion into an async
  sequence of partial ``GenerateContentResponse`` values, one per non-empty
  text delta, in arrival order.

Resource handling:
- The generator owns the ``httpx.Response`` it is handed (and the per-call
  client, when one was built for it). Both are released in ``finally`` on
  every exit path: exhaustion, consumer early exit (``aclose()``), or a read
  error, which propagates to the consumer.

Notes:
- ``data: [DONE]`` does not end the loop; the stream ends when the body does.
- Lines whose payload is not valid JSON are dropped and logged at debug.
- A trailing fragment without a final newline is discarded at end of body.
"""

from __future__ import annotations

import json
import logging
import time
from typing import AsyncIterator, Optional

import httpx
from pydantic import ValidationError

from ..base.errors import classify_exception
from ..base.logging import LogContext, log_event, normalized_log_event
from ..base.models import GenerateContentResponse
from ..base.streaming import SSELineBuffer, StreamMetrics, StreamState
from ..base.streaming.sse import sse_data_payload
from .chat_helpers import text_candidate
from .wire import OpenRouterStreamChunk


def parse_stream_line(line: str) -> Optional[OpenRouterStreamChunk]:
    """Decode one SSE line into a stream chunk.

    Returns ``None`` for lines that carry no event (non-``data:`` lines and
    the ``[DONE]`` terminator). Raises ``ValueError`` (``json`` decode or
    pydantic validation) when the payload is malformed.
    """
    data = sse_data_payload(line)
    if data is None:
        return None
    return OpenRouterStreamChunk.model_validate(json.loads(data))


async def iter_stream_responses(
    response: httpx.Response,
    *,
    logger: logging.Logger,
    ctx: Optional[LogContext] = None,
    owned_client: Optional[httpx.AsyncClient] = None,
) -> AsyncIterator[GenerateContentResponse]:
    """Yield one partial response per non-empty delta of ``response``.

    Parameters:
        response: An open streaming response whose status was already checked.
        logger: Logger for decode and lifecycle events.
        ctx: Log context shared by the events.
        owned_client: Per-call client to close together with ``response``.

    Yields:
        ``GenerateContentResponse`` with a single ``model`` candidate whose
        only part is the delta text and no finish reason.
    """
    buffer = SSELineBuffer()
    metrics = StreamMetrics()
    state = StreamState.STREAMING
    started = time.perf_counter()
    error_type: Optional[str] = None
    try:
        async for chunk in response.aiter_bytes():
            for line in buffer.feed(chunk):
                try:
                    event = parse_stream_line(line)
                except (ValueError, ValidationError) as exc:
                    metrics.discarded += 1
                    log_event(
                        logger,
                        "stream.decode_error",
                        ctx,
                        level=logging.DEBUG,
                        error=str(exc),
                        line_length=len(line),
                    )
                    continue
                if event is None:
                    continue
                text = event.first_delta_text()
                if not text:
                    continue
                if metrics.time_to_first_token_ms is None:
                    metrics.time_to_first_token_ms = (time.perf_counter() - started) * 1000.0
                metrics.emitted += 1
                yield GenerateContentResponse(candidates=[text_candidate(text)])
        state = StreamState.DONE
    except httpx.HTTPError as exc:
        error_type = type(exc).__name__
        normalized_log_event(
            logger,
            "stream.error",
            ctx,
            phase="mid_stream",
            error_code=classify_exception(exc).value,
            emitted=metrics.emitted,
            tokens=None,
            level=logging.ERROR,
            error=str(exc),
            error_type=error_type,
        )
        raise
    finally:
        try:
            await response.aclose()
        finally:
            if owned_client is not None:
                await owned_client.aclose()
            metrics.total_duration_ms = (time.perf_counter() - started) * 1000.0
            normalized_log_event(
                logger,
                "stream.end",
                ctx,
                phase="finalize",
                emitted=metrics.emitted,
                tokens=None,
                completed=state is StreamState.DONE,
                state=StreamState.CLOSED.value,
                error_type=error_type,
                **{k: v for k, v in metrics.to_dict().items() if k != "emitted"},
            )


__all__ = ["parse_stream_line", "iter_stream_responses"]
