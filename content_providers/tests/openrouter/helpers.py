"""HTTP fakes shared by the OpenRouter adapter tests.

``FakeOpenRouter`` is a ``httpx.MockTransport`` handler that records requests;
``RecordingByteStream`` is a response body that records closure and can fail
mid-read.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterable, List, Optional

import httpx


class RecordingByteStream(httpx.AsyncByteStream):
    """Async body yielding preset chunks; records closure and can fail mid-read or on close."""

    def __init__(
        self,
        chunks: Iterable[bytes],
        fail_after: Optional[int] = None,
        fail_on_close: bool = False,
    ) -> None:
        self._chunks = list(chunks)
        self._fail_after = fail_after
        self._fail_on_close = fail_on_close
        self.closed = False
        self.chunks_read = 0

    async def __aiter__(self):
        for index, chunk in enumerate(self._chunks):
            if self._fail_after is not None and index >= self._fail_after:
                raise httpx.ReadError("connection reset by peer")
            self.chunks_read += 1
            yield chunk
        if self._fail_after is not None and self._fail_after >= len(self._chunks):
            raise httpx.ReadError("connection reset by peer")

    async def aclose(self) -> None:
        self.closed = True
        if self._fail_on_close:
            raise httpx.CloseError("socket already shut down")


class FakeOpenRouter:
    """MockTransport handler recording every request it answers."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self._responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def completion_payload(
    content: Optional[str] = "Hello, world!",
    finish_reason: Optional[str] = "stop",
    usage: Optional[Dict[str, int]] = None,
) -> Dict[str, Any]:
    """Build a minimal chat-completions response body."""

    body: Dict[str, Any] = {
        "id": "gen-123",
        "choices": [
            {
                "message": {"role": "assistant", "content": content},
                "finish_reason": finish_reason,
            }
        ],
    }
    if usage is not None:
        body["usage"] = usage
    return body


def sse_event(text: str) -> bytes:
    """Encode one ``data:`` line carrying a text delta."""

    payload = json.dumps({"choices": [{"delta": {"content": text}}]}, ensure_ascii=False)
    return ("data: " + payload + "\n").encode("utf-8")
