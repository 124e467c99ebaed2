"""WebSocket runtime abstractions."""

from .client import AsyncWebSocketConnection, WebSocketConfig, WebSocketConnection
from .protocol import (
    ControlMethod,
    MessageIds,
    Stream,
    StreamLike,
    build_control_message,
    stream_names,
)

__all__ = [
    "WebSocketConnection",
    "AsyncWebSocketConnection",
    "WebSocketConfig",
    "ControlMethod",
    "MessageIds",
    "Stream",
    "StreamLike",
    "build_control_message",
    "stream_names",
]
