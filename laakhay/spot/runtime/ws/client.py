"""WebSocket connections with subscription control.

``WebSocketConnection`` uses the threading client of ``websockets``;
``AsyncWebSocketConnection`` uses its asyncio client. Both speak the same
control protocol and number their messages the same way.

Example:
    >>> from laakhay.spot.endpoints import streams
    >>> with WebSocketConnection.connect() as conn:
    ...     conn.subscribe([streams.trade_stream("BTCUSDT")])
    ...     for message in conn:
    ...         print(message)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional, Union

import websockets
import websockets.sync.client

from ...config import WS_BASE_URL
from .protocol import ControlMethod, MessageIds, StreamLike, build_control_message

logger = logging.getLogger(__name__)

__all__ = ["AsyncWebSocketConnection", "WebSocketConfig", "WebSocketConnection"]


@dataclass
class WebSocketConfig:
    """Options handed to ``websockets`` when connecting."""

    open_timeout: Optional[float] = 10.0
    ping_interval: Optional[float] = 20.0
    ping_timeout: Optional[float] = 20.0
    close_timeout: Optional[float] = 10.0
    max_size: Optional[int] = None  # bytes; None = websockets default
    max_queue: Optional[int] = None  # messages; None = websockets default

    def sync_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the threading client."""
        kwargs: dict[str, Any] = {
            "open_timeout": self.open_timeout,
            "ping_interval": self.ping_interval,
            "ping_timeout": self.ping_timeout,
            "close_timeout": self.close_timeout,
        }
        # Only include size if not None to keep library defaults
        if self.max_size is not None:
            kwargs["max_size"] = self.max_size
        return kwargs

    def async_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the asyncio client."""
        kwargs = self.sync_kwargs()
        if self.max_queue is not None:
            kwargs["max_queue"] = self.max_queue
        return kwargs


def _log_handshake(url: str, socket: Any) -> None:
    logger.info("Connected to %s", url)
    response = getattr(socket, "response", None)
    if response is None:
        return
    logger.debug("Response HTTP code: %s", response.status_code)
    logger.debug("Response headers: %s", ", ".join(name for name, _ in response.headers.raw_items()))


class WebSocketConnection:
    """Blocking connection driven by a single thread."""

    def __init__(self, socket: Any) -> None:
        self._socket = socket
        self._ids = MessageIds()

    @classmethod
    def connect(
        cls,
        url: str = WS_BASE_URL,
        config: WebSocketConfig | None = None,
    ) -> WebSocketConnection:
        """Open a connection to ``url``."""
        conf = config or WebSocketConfig()
        socket = websockets.sync.client.connect(url, **conf.sync_kwargs())
        _log_handshake(url, socket)
        return cls(socket)

    @property
    def socket(self) -> Any:
        """Underlying ``websockets`` connection."""
        return self._socket

    @property
    def next_id(self) -> int:
        """Id the next control message will carry."""
        return self._ids.next_id

    def _send(self, method: ControlMethod, streams: Iterable[StreamLike]) -> int:
        message_id = self._ids.take()
        message = build_control_message(method, streams, message_id)
        logger.debug("Sent %s", message)
        self._socket.send(message)
        return message_id

    def subscribe(self, streams: Iterable[StreamLike]) -> int:
        """Send ``SUBSCRIBE`` for ``streams``; return the message id.

        Streams are not validated. Subscribing to an existing stream is
        ignored by the server.
        """
        return self._send(ControlMethod.SUBSCRIBE, streams)

    def unsubscribe(self, streams: Iterable[StreamLike]) -> int:
        """Send ``UNSUBSCRIBE`` for ``streams``; return the message id."""
        return self._send(ControlMethod.UNSUBSCRIBE, streams)

    def subscriptions(self) -> int:
        """Send ``LIST_SUBSCRIPTIONS``; return the message id."""
        return self._send(ControlMethod.LIST_SUBSCRIPTIONS, ())

    def recv(self, timeout: float | None = None) -> Union[str, bytes]:
        """Receive the next frame."""
        return self._socket.recv(timeout)

    def __iter__(self) -> Iterator[Union[str, bytes]]:
        return iter(self._socket)

    def close(self) -> None:
        """Close the connection."""
        self._socket.close()

    def __enter__(self) -> WebSocketConnection:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()


class AsyncWebSocketConnection:
    """Asyncio connection driven by a single task."""

    def __init__(self, socket: Any) -> None:
        self._socket = socket
        self._ids = MessageIds()

    @classmethod
    async def connect(
        cls,
        url: str = WS_BASE_URL,
        config: WebSocketConfig | None = None,
    ) -> AsyncWebSocketConnection:
        """Open a connection to ``url``."""
        conf = config or WebSocketConfig()
        socket = await websockets.connect(url, **conf.async_kwargs())
        _log_handshake(url, socket)
        return cls(socket)

    @property
    def socket(self) -> Any:
        """Underlying ``websockets`` connection."""
        return self._socket

    @property
    def next_id(self) -> int:
        """Id the next control message will carry."""
        return self._ids.next_id

    async def _send(self, method: ControlMethod, streams: Iterable[StreamLike]) -> int:
        # Taken before awaiting: a cancelled send still consumes its id.
        message_id = self._ids.take()
        message = build_control_message(method, streams, message_id)
        logger.debug("Sent %s", message)
        await self._socket.send(message)
        return message_id

    async def subscribe(self, streams: Iterable[StreamLike]) -> int:
        """Send ``SUBSCRIBE`` for ``streams``; return the message id."""
        return await self._send(ControlMethod.SUBSCRIBE, streams)

    async def unsubscribe(self, streams: Iterable[StreamLike]) -> int:
        """Send ``UNSUBSCRIBE`` for ``streams``; return the message id."""
        return await self._send(ControlMethod.UNSUBSCRIBE, streams)

    async def subscriptions(self) -> int:
        """Send ``LIST_SUBSCRIPTIONS``; return the message id."""
        return await self._send(ControlMethod.LIST_SUBSCRIPTIONS, ())

    async def recv(self) -> Union[str, bytes]:
        """Receive the next frame."""
        return await self._socket.recv()

    async def __aiter__(self) -> AsyncIterator[Union[str, bytes]]:
        async for message in self._socket:
            yield message

    async def close(self) -> None:
        """Close the connection."""
        await self._socket.close()

    async def __aenter__(self) -> AsyncWebSocketConnection:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
