"""HTTP transports: the only transport-specific piece of the send pipeline.

A transport dispatches an already prepared request (method, URL, headers,
empty body) and wraps whatever comes back, whatever the status code. Network
failures are translated into ``SendError``.

Timeouts and connection pooling are the transport library's own business;
both transports accept the library's timeout setting as-is.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Optional, Protocol, Union

import aiohttp
import requests
from yarl import URL

from ...core.exceptions import SendError
from .response import AsyncResponse, Response

__all__ = [
    "AiohttpTransport",
    "AsyncHTTPTransport",
    "HTTPTransport",
    "RequestsTransport",
]


class HTTPTransport(Protocol):
    """Blocking transport contract."""

    def issue(self, method: str, url: str, headers: Mapping[str, str]) -> Response:
        """Send the request and wrap the raw response."""
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...


class AsyncHTTPTransport(Protocol):
    """Async transport contract."""

    async def issue(self, method: str, url: str, headers: Mapping[str, str]) -> AsyncResponse:
        """Send the request and wrap the raw response."""
        ...

    async def close(self) -> None:
        """Release pooled connections."""
        ...


class RequestsTransport:
    """Blocking transport on a ``requests.Session``.

    A session is logically stateless apart from its connection pool, so one
    transport can be shared by threads using the same client.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Union[float, tuple[float, float], None] = 30.0,
    ) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self.timeout = timeout

    @property
    def session(self) -> requests.Session:
        """Underlying session."""
        return self._session

    def issue(self, method: str, url: str, headers: Mapping[str, str]) -> Response:
        try:
            raw = self._session.request(
                method,
                url,
                headers=dict(headers),
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            raise SendError(f"{method} request failed: {exc}") from exc
        return Response(raw)

    def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session:
            self._session.close()


class AiohttpTransport:
    """Async transport on a lazily created ``aiohttp.ClientSession``."""

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: float | None = 30.0,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def issue(self, method: str, url: str, headers: Mapping[str, str]) -> AsyncResponse:
        try:
            # The query string is already form-encoded and signed; it must
            # reach the wire byte for byte.
            raw = await self.session.request(
                method,
                URL(url, encoded=True),
                headers=dict(headers),
                allow_redirects=False,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise SendError(f"{method} request failed: {exc!r}") from exc
        return AsyncResponse(raw)

    async def close(self) -> None:
        """Close session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AiohttpTransport:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
