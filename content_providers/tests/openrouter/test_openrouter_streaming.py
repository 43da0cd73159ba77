"""Stream normalization tests for the OpenRouter adapter.

Drives ``iter_stream_responses`` and ``generate_content_stream`` over
``httpx`` responses backed by ``RecordingByteStream`` so chunk boundaries,
decode failures, consumer early exit and read errors are deterministic.
"""
from __future__ import annotations

import contextlib
import logging

import httpx
import pytest

from content_providers.base.errors import EmptyResponseBodyError, ErrorCode, ProviderHTTPError
from content_providers.base.logging import REQUIRED_NORMALIZED_KEYS, LogContext, get_logger
from content_providers.base.models import Content, GenerateContentParameters
from content_providers.openrouter import OpenRouterContentGenerator
from content_providers.openrouter.stream_helpers import iter_stream_responses, parse_stream_line

from content_providers.tests.openrouter.helpers import FakeOpenRouter, RecordingByteStream, sse_event

MODEL = "anthropic/claude-3-opus"
CTX = LogContext(provider="openrouter", model=MODEL)


def _response(chunks, **kwargs) -> tuple[httpx.Response, RecordingByteStream]:
    body = RecordingByteStream(chunks, **kwargs)
    return httpx.Response(200, stream=body), body


async def _collect(response: httpx.Response) -> list[str]:
    out = []
    async for item in iter_stream_responses(response, logger=get_logger("openrouter.test"), ctx=CTX):
        out.append(item.candidates[0].content.parts[0].text)
    return out


@pytest.mark.asyncio
async def test_two_deltas_then_done():
    response, body = _response(
        [
            b'data: {"choices":[{"delta":{"content":"Hello"}}]}\n',
            b'data: {"choices":[{"delta":{"content":" world"}}]}\n',
            b"data: [DONE]\n",
        ]
    )
    assert await _collect(response) == ["Hello", " world"]  # nosec B101
    assert body.closed  # nosec B101


@pytest.mark.asyncio
async def test_partial_responses_have_model_role_and_no_finish_reason():
    response, _ = _response([sse_event("Hi")])
    items = [item async for item in iter_stream_responses(response, logger=get_logger("openrouter.test"))]
    candidate = items[0].candidates[0]
    assert candidate.content.role == "model"  # nosec B101
    assert candidate.finish_reason is None  # nosec B101
    assert items[0].usage_metadata is None  # nosec B101


@pytest.mark.asyncio
async def test_malformed_line_is_skipped_and_logged(log_capture):
    response, _ = _response([sse_event("a"), b"data: {not json\n", sse_event("b")])
    assert await _collect(response) == ["a", "b"]  # nosec B101

    decode_errors = log_capture.events("stream.decode_error")
    assert len(decode_errors) == 1  # nosec B101
    assert decode_errors[0]["_level"] == logging.DEBUG  # nosec B101
    end = log_capture.events("stream.end")[-1]
    assert end["emitted"] == 2 and end["discarded"] == 1  # nosec B101
    assert end["completed"] is True  # nosec B101
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in end  # nosec B101


@pytest.mark.asyncio
async def test_non_data_lines_and_empty_deltas_are_ignored():
    response, _ = _response(
        [
            b": keep-alive comment\n",
            b"event: message\n",
            b"\n",
            b'data: {"choices":[{"delta":{"role":"assistant"}}]}\n',
            b'data: {"choices":[{"delta":{"content":""}}]}\n',
            b'data: {"choices":[]}\n',
            b'data: {"id":"gen-1"}\n',
            sse_event("only"),
        ]
    )
    assert await _collect(response) == ["only"]  # nosec B101


@pytest.mark.asyncio
async def test_lines_reassembled_across_arbitrary_chunk_splits():
    raw = sse_event("Grüße 👋") + sse_event("second")
    # Split every 3 bytes so both the JSON and the multi-byte characters straddle reads.
    chunks = [raw[i:i + 3] for i in range(0, len(raw), 3)]
    response, _ = _response(chunks)
    assert await _collect(response) == ["Grüße 👋", "second"]  # nosec B101


@pytest.mark.asyncio
async def test_every_two_cut_split_matches_single_chunk_delivery():
    raw = (
        sse_event("a")
        + b"data: {not json\n"
        + sse_event("Grüße 👋")
        + b"data: [DONE]\n"
        + sse_event("z")
    )
    logger = get_logger("openrouter.splits")
    logger.setLevel(logging.WARNING)
    try:
        whole, _ = _response([raw])
        expected = [item.text async for item in iter_stream_responses(whole, logger=logger)]
        assert expected == ["a", "Grüße 👋", "z"]  # nosec B101

        mismatches = []
        for i in range(len(raw) + 1):
            for j in range(i, len(raw) + 1):
                response, _ = _response([raw[:i], raw[i:j], raw[j:]])
                got = [item.text async for item in iter_stream_responses(response, logger=logger)]
                if got != expected:
                    mismatches.append((i, j, got))
    finally:
        logger.setLevel(logging.NOTSET)
    assert mismatches == []  # nosec B101


@pytest.mark.asyncio
async def test_done_marker_does_not_end_the_stream():
    response, _ = _response([sse_event("a"), b"data: [DONE]\n", sse_event("late")])
    assert await _collect(response) == ["a", "late"]  # nosec B101


@pytest.mark.asyncio
async def test_unterminated_trailing_fragment_is_discarded():
    response, _ = _response([sse_event("kept"), b'data: {"choices":[{"delta":{"content":"lost"}}]}'])
    assert await _collect(response) == ["kept"]  # nosec B101


@pytest.mark.asyncio
async def test_early_exit_closes_the_response():
    response, body = _response([sse_event("one"), sse_event("two"), sse_event("three")])
    seen = []
    stream = iter_stream_responses(response, logger=get_logger("openrouter.test"), ctx=CTX)
    async with contextlib.aclosing(stream) as items:
        async for item in items:
            seen.append(item.text)
            break
    assert seen == ["one"]  # nosec B101
    assert body.closed  # nosec B101
    assert body.chunks_read == 1  # nosec B101


@pytest.mark.asyncio
async def test_read_error_propagates_after_earlier_items_and_closes(log_capture):
    response, body = _response([sse_event("before")], fail_after=1)
    seen = []
    with pytest.raises(httpx.ReadError):
        async for item in iter_stream_responses(response, logger=get_logger("openrouter.test"), ctx=CTX):
            seen.append(item.text)
    assert seen == ["before"]  # nosec B101
    assert body.closed  # nosec B101
    error = log_capture.events("stream.error")[-1]
    assert error["error_code"] == ErrorCode.TRANSIENT.value  # nosec B101
    assert log_capture.events("stream.end")[-1]["completed"] is False  # nosec B101


@pytest.mark.asyncio
async def test_failing_response_close_still_closes_owned_client():
    response, body = _response([sse_event("x")], fail_on_close=True)
    owned = httpx.AsyncClient()
    seen = []
    with pytest.raises(httpx.CloseError):
        async for item in iter_stream_responses(
            response, logger=get_logger("openrouter.test"), ctx=CTX, owned_client=owned
        ):
            seen.append(item.text)
    assert seen == ["x"]  # nosec B101
    assert body.closed  # nosec B101
    assert owned.is_closed  # nosec B101


def test_parse_stream_line_shapes():
    assert parse_stream_line("event: ping") is None  # nosec B101
    assert parse_stream_line("data: [DONE]") is None  # nosec B101
    chunk = parse_stream_line('data: {"choices":[{"delta":{"content":"x"}}],"extra":1}')
    assert chunk is not None and chunk.first_delta_text() == "x"  # nosec B101
    with pytest.raises(ValueError):
        parse_stream_line("data: nope")


# ---- adapter-level streaming ----


def _request() -> GenerateContentParameters:
    return GenerateContentParameters(model=MODEL, contents=[Content.from_text("Hello")])


@pytest.mark.asyncio
async def test_adapter_stream_sends_stream_flag_and_yields_deltas():
    body = RecordingByteStream([sse_event("Hello"), sse_event(" world"), b"data: [DONE]\n"])
    fake = FakeOpenRouter(lambda request: httpx.Response(200, stream=body))
    async with fake.client() as client:
        generator = OpenRouterContentGenerator("sk-or-unit", MODEL, http_client=client)
        stream = await generator.generate_content_stream(_request())
        texts = [item.text async for item in stream]

    assert texts == ["Hello", " world"]  # nosec B101
    assert fake.last_json["stream"] is True  # nosec B101
    assert fake.last_json["model"] == MODEL  # nosec B101
    assert body.closed  # nosec B101


@pytest.mark.asyncio
async def test_adapter_stream_http_error_raised_before_iteration():
    body = RecordingByteStream([b"Unauthorized"])
    fake = FakeOpenRouter(lambda request: httpx.Response(401, stream=body))
    async with fake.client() as client:
        generator = OpenRouterContentGenerator("sk-or-unit", MODEL, http_client=client)
        with pytest.raises(ProviderHTTPError) as info:
            await generator.generate_content_stream(_request())

    err = info.value
    assert err.message == "OpenRouter API error: 401 - Unauthorized"  # nosec B101
    assert err.http_status == 401  # nosec B101
    assert err.code is ErrorCode.AUTH  # nosec B101
    assert body.closed  # nosec B101


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [204, 205])
async def test_adapter_stream_without_body_raises_empty_body(status):
    fake = FakeOpenRouter(lambda request: httpx.Response(status))
    async with fake.client() as client:
        generator = OpenRouterContentGenerator("sk-or-unit", MODEL, http_client=client)
        with pytest.raises(EmptyResponseBodyError) as info:
            await generator.generate_content_stream(_request())
    assert info.value.code is ErrorCode.EMPTY_BODY  # nosec B101


@pytest.mark.asyncio
async def test_adapter_stream_closes_per_call_client(monkeypatch):
    body = RecordingByteStream([sse_event("x")])
    fake = FakeOpenRouter(lambda request: httpx.Response(200, stream=body))
    built: list[httpx.AsyncClient] = []

    def _build(base_url, purpose, transport=None):
        assert purpose == "stream"  # nosec B101
        client = httpx.AsyncClient(transport=httpx.MockTransport(fake))
        built.append(client)
        return client

    monkeypatch.setattr("content_providers.openrouter.client.build_async_client", _build)
    generator = OpenRouterContentGenerator("sk-or-unit", MODEL)
    stream = await generator.generate_content_stream(_request())
    assert not built[0].is_closed  # nosec B101
    assert [item.text async for item in stream] == ["x"]  # nosec B101
    assert built[0].is_closed  # nosec B101
