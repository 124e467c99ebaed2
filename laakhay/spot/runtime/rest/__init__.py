"""REST runtime abstractions."""

from .client import AsyncSpotHTTPClient, SpotHTTPClient
from .response import AsyncResponse, Response
from .transport import AiohttpTransport, AsyncHTTPTransport, HTTPTransport, RequestsTransport

__all__ = [
    "SpotHTTPClient",
    "AsyncSpotHTTPClient",
    "HTTPTransport",
    "AsyncHTTPTransport",
    "RequestsTransport",
    "AiohttpTransport",
    "Response",
    "AsyncResponse",
]
