"""Runtime layer: REST clients and WebSocket connections."""

from .rest import (
    AiohttpTransport,
    AsyncResponse,
    AsyncSpotHTTPClient,
    RequestsTransport,
    Response,
    SpotHTTPClient,
)
from .ws import AsyncWebSocketConnection, Stream, WebSocketConfig, WebSocketConnection

__all__ = [
    "SpotHTTPClient",
    "AsyncSpotHTTPClient",
    "RequestsTransport",
    "AiohttpTransport",
    "Response",
    "AsyncResponse",
    "WebSocketConnection",
    "AsyncWebSocketConnection",
    "WebSocketConfig",
    "Stream",
]
