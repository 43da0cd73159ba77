"""Server-sent events line framing.

``SSELineBuffer`` turns arbitrarily split network chunks into complete text
lines. Decoding is incremental, so a multi-byte UTF-8 character split across
two chunks is reassembled instead of being replaced. The trailing fragment
after the last newline stays buffered until more bytes arrive.

One buffer belongs to one stream consumer; it is never shared.
"""
from __future__ import annotations

import codecs
from enum import Enum
from typing import List, Optional

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL


class StreamState(str, Enum):
    """Lifecycle of a streaming body consumer.

    ``STREAMING`` while reads are pending, ``DONE`` once the body reported
    completion, ``CLOSED`` after the response has been released. A read
    failure propagates from ``STREAMING`` and the response is still closed.
    """

    STREAMING = "streaming"
    DONE = "done"
    CLOSED = "closed"


class SSELineBuffer:
    """Reassemble newline-delimited text lines from byte chunks.

    ``httpx.Response.aiter_lines()`` is not used: it flushes an unterminated
    final fragment as a line at end of body and also breaks on a bare ``\\r``.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Text received after the last newline (not yet a complete line)."""
        return self._buffer

    def feed(self, chunk: bytes) -> List[str]:
        """Append ``chunk`` and return the lines it completed, in order.

        Lines are split on ``\\n``; a ``\\r`` preceding the newline is kept so
        callers see the line exactly as sent.
        """
        self._buffer += self._decoder.decode(chunk)
        lines = self._buffer.split("\n")
        self._buffer = lines.pop()
        return lines


def sse_data_payload(line: str) -> Optional[str]:
    """Return the payload of a ``data: `` line.

    Returns ``None`` for lines without the prefix (comments, ``event:``
    fields, blank separators) and for the ``[DONE]`` terminator.
    """
    if not line.startswith(SSE_DATA_PREFIX):
        return None
    data = line[len(SSE_DATA_PREFIX):]
    if data == SSE_DONE_SENTINEL:
        return None
    return data


__all__ = ["StreamState", "SSELineBuffer", "sse_data_payload"]
