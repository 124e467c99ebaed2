"""Laakhay Spot - Binance Spot REST and WebSocket connector."""

from . import endpoints
from .config import (
    BASE_URL,
    TESTNET_BASE_URL,
    TESTNET_WS_BASE_URL,
    WS_BASE_URL,
    WS_RAW_URL,
    load_credentials,
)
from .core import (
    ClientError,
    Credentials,
    HttpError,
    InvalidApiSecretError,
    KlineInterval,
    Method,
    MissingCredentialsError,
    NewOrderResponseType,
    ParseError,
    RawClientError,
    Request,
    RequestBuilder,
    SendError,
    ServerError,
    Side,
    SpotError,
    StructuredClientError,
    TimeInForce,
    current_millis,
    timestamp_delta,
)
from .runtime import (
    AiohttpTransport,
    AsyncResponse,
    AsyncSpotHTTPClient,
    AsyncWebSocketConnection,
    RequestsTransport,
    Response,
    SpotHTTPClient,
    Stream,
    WebSocketConfig,
    WebSocketConnection,
)
from .version import __version__

__all__ = [
    "__version__",
    # Config
    "BASE_URL",
    "TESTNET_BASE_URL",
    "WS_BASE_URL",
    "WS_RAW_URL",
    "TESTNET_WS_BASE_URL",
    "load_credentials",
    # Requests
    "Method",
    "KlineInterval",
    "Side",
    "TimeInForce",
    "NewOrderResponseType",
    "Credentials",
    "Request",
    "RequestBuilder",
    "endpoints",
    # Clients
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
    # Clock
    "current_millis",
    "timestamp_delta",
    # Exceptions
    "SpotError",
    "InvalidApiSecretError",
    "MissingCredentialsError",
    "ParseError",
    "SendError",
    "HttpError",
    "ClientError",
    "StructuredClientError",
    "RawClientError",
    "ServerError",
]
