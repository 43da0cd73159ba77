"""Streaming primitives for the provider layer."""

from .sse import SSELineBuffer, StreamState, sse_data_payload
from .streaming_metrics import StreamMetrics

__all__ = ["SSELineBuffer", "StreamState", "sse_data_payload", "StreamMetrics"]
