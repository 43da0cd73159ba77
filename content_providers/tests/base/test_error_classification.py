from __future__ import annotations

import asyncio
import types

import httpx
import pytest

from content_providers.base.errors import (
    EmptyResponseBodyError,
    ErrorCode,
    ProviderError,
    ProviderHTTPError,
    UnsupportedOperationError,
    classify_exception,
    classify_status,
)


def test_classify_provider_error_passthrough():
    e = ProviderHTTPError(code=ErrorCode.RATE_LIMIT, message="slow down", provider="x", http_status=429)
    assert classify_exception(e) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests


@pytest.mark.parametrize(
    ("status", "code"),
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (402, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (409, ErrorCode.CONFLICT),
        (429, ErrorCode.RATE_LIMIT),
        (451, ErrorCode.VALIDATION),
        (500, ErrorCode.SERVER_ERROR),
        (502, ErrorCode.TRANSIENT),
        (504, ErrorCode.TIMEOUT),
        (599, ErrorCode.SERVER_ERROR),
        (302, ErrorCode.UNKNOWN),
    ],
)
def test_classify_status(status, code):
    assert classify_status(status) is code  # nosec B101 - assert is appropriate in unit tests


def test_classify_transport_errors():
    request = httpx.Request("POST", "https://example.invalid/chat/completions")
    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.TRANSIENT  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("unsupported parameter")) is ErrorCode.UNSUPPORTED  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests


def test_error_string_and_subclasses():
    e = ProviderError(code=ErrorCode.AUTH, message="key missing", provider="openrouter")
    assert str(e) == "openrouter:- auth: key missing"  # nosec B101
    assert isinstance(EmptyResponseBodyError(code=ErrorCode.EMPTY_BODY, message="m", provider="p"), ProviderError)  # nosec B101
    unsupported = UnsupportedOperationError(
        code=ErrorCode.UNSUPPORTED, message="no", provider="p", model="m", operation="embed_content"
    )
    assert str(unsupported) == "p:m unsupported: no"  # nosec B101
    assert unsupported.operation == "embed_content"  # nosec B101
