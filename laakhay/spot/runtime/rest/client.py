"""Blocking and async REST clients.

Both clients run the same pipeline (``core.pipeline.prepare_request``) and
only differ in the transport that dispatches the prepared request.

Example:
    >>> from laakhay.spot import SpotHTTPClient
    >>> from laakhay.spot.endpoints import market
    >>> client = SpotHTTPClient()
    >>> body = client.send(market.avg_price("BNBUSDT")).into_body_str()

Design Decisions:
    - Clients are immutable after construction: ``with_credentials`` and
      ``with_timestamp_delta`` return new clients sharing the transport
    - ``send`` returns a response for every status code; errors surface when
      the body is consumed
    - No per-call state, so concurrent sends on one client are independent
"""

from __future__ import annotations

import copy
import json
import logging

from ...config import BASE_URL
from ...core.clock import current_millis, timestamp_delta
from ...core.credentials import Credentials
from ...core.enums import Method
from ...core.pipeline import PreparedRequest, prepare_request
from ...core.request import RequestBuilder, RequestLike
from .response import AsyncResponse, Response
from .transport import AiohttpTransport, AsyncHTTPTransport, HTTPTransport, RequestsTransport

logger = logging.getLogger(__name__)

__all__ = ["AsyncSpotHTTPClient", "SpotHTTPClient"]

SERVER_TIME_PATH = "/api/v3/time"


class _ClientBase:
    """Settings shared by both clients."""

    def __init__(
        self,
        base_url: str,
        *,
        credentials: Credentials | None = None,
        timestamp_delta: int = 0,
    ) -> None:
        self.base_url = base_url
        self.credentials = credentials
        self.timestamp_delta = timestamp_delta

    def with_credentials(self, credentials: Credentials):
        """Return a copy of this client with default credentials set."""
        clone = copy.copy(self)
        clone.credentials = credentials
        return clone

    def with_timestamp_delta(self, delta_ms: int):
        """Return a copy of this client correcting signed timestamps by ``delta_ms``."""
        clone = copy.copy(self)
        clone.timestamp_delta = delta_ms
        return clone

    def _prepare(self, request: RequestLike) -> PreparedRequest:
        prepared = prepare_request(
            request,
            base_url=self.base_url,
            client_credentials=self.credentials,
            timestamp_delta=self.timestamp_delta,
        )
        logger.debug("%s %s", prepared.method.value, prepared.url)
        return prepared

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self.base_url!r}, "
            f"authenticated={self.credentials is not None}, "
            f"timestamp_delta={self.timestamp_delta})"
        )


class SpotHTTPClient(_ClientBase):
    """Blocking REST client (``requests`` by default)."""

    def __init__(
        self,
        base_url: str = BASE_URL,
        *,
        transport: HTTPTransport | None = None,
        credentials: Credentials | None = None,
        timestamp_delta: int = 0,
    ) -> None:
        super().__init__(base_url, credentials=credentials, timestamp_delta=timestamp_delta)
        self.transport = transport or RequestsTransport()

    def send(self, request: RequestLike) -> Response:
        """Prepare, sign if required, and dispatch ``request``.

        Raises:
            ParseError: URL or headers could not be assembled
            MissingCredentialsError: Signing requested without credentials
            InvalidApiSecretError: Key material cannot sign
            SendError: Network failure
        """
        prepared = self._prepare(request)
        response = self.transport.issue(prepared.method.value, prepared.url, prepared.headers)
        logger.debug("%s", response.status_code)
        return response

    def fetch_timestamp_delta(self) -> int:
        """Measure local clock minus server clock against ``GET /api/v3/time``."""
        body = self.send(RequestBuilder(Method.GET, SERVER_TIME_PATH)).into_body_str()
        return timestamp_delta(json.loads(body)["serverTime"], current_millis())

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __enter__(self) -> SpotHTTPClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


class AsyncSpotHTTPClient(_ClientBase):
    """Async REST client (``aiohttp`` by default).

    The only suspension points are the network call and the body read.
    Abandoning an in-flight ``send`` leaves the client untouched.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        *,
        transport: AsyncHTTPTransport | None = None,
        credentials: Credentials | None = None,
        timestamp_delta: int = 0,
    ) -> None:
        super().__init__(base_url, credentials=credentials, timestamp_delta=timestamp_delta)
        self.transport = transport or AiohttpTransport()

    async def send(self, request: RequestLike) -> AsyncResponse:
        """Prepare, sign if required, and dispatch ``request``.

        Raises:
            ParseError: URL or headers could not be assembled
            MissingCredentialsError: Signing requested without credentials
            InvalidApiSecretError: Key material cannot sign
            SendError: Network failure
        """
        prepared = self._prepare(request)
        response = await self.transport.issue(
            prepared.method.value, prepared.url, prepared.headers
        )
        logger.debug("%s", response.status_code)
        return response

    async def fetch_timestamp_delta(self) -> int:
        """Measure local clock minus server clock against ``GET /api/v3/time``."""
        response = await self.send(RequestBuilder(Method.GET, SERVER_TIME_PATH))
        body = await response.into_body_str()
        return timestamp_delta(json.loads(body)["serverTime"], current_millis())

    async def close(self) -> None:
        """Close the underlying transport."""
        await self.transport.close()

    async def __aenter__(self) -> AsyncSpotHTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
