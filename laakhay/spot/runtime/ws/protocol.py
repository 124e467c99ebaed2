"""WebSocket subscription control messages.

Outbound control messages are JSON objects::

    {"method": "SUBSCRIBE", "params": ["btcusdt@trade"], "id": 0}

``id`` starts at 0 on every connection and grows by one per message of any
kind. It is returned to the caller, who can match it against the server's
acknowledgement later; nothing waits for that acknowledgement here.

Stream names are opaque. The server accepts unknown names and simply never
sends data for them.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "ControlMethod",
    "MessageIds",
    "Stream",
    "StreamLike",
    "build_control_message",
    "stream_names",
]


class ControlMethod(str, Enum):
    """Control message methods."""

    SUBSCRIBE = "SUBSCRIBE"
    UNSUBSCRIBE = "UNSUBSCRIBE"
    LIST_SUBSCRIPTIONS = "LIST_SUBSCRIPTIONS"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


@dataclass(frozen=True)
class Stream:
    """Named WebSocket stream, e.g. ``btcusdt@kline_1m``."""

    name: str

    def __str__(self) -> str:
        return self.name


StreamLike = Union[Stream, str]


def stream_names(streams: Iterable[StreamLike]) -> list[str]:
    """Normalize streams to their wire names."""
    return [str(stream) for stream in streams]


def build_control_message(
    method: ControlMethod,
    streams: Iterable[StreamLike],
    message_id: int,
) -> str:
    """Serialize one control message.

    The ``params`` key is left out when there are no streams, which is
    always the case for ``LIST_SUBSCRIPTIONS``.
    """
    message: dict[str, object] = {"method": ControlMethod(method).value}
    params = stream_names(streams)
    if params:
        message["params"] = params
    message["id"] = message_id
    return json.dumps(message, separators=(",", ":"))


class MessageIds:
    """Per-connection message id sequence.

    Only the task or thread driving the connection may touch it.
    """

    def __init__(self, start: int = 0) -> None:
        self._next = start

    @property
    def next_id(self) -> int:
        """Id the next control message will carry."""
        return self._next

    def take(self) -> int:
        """Return the next id and advance the sequence."""
        message_id = self._next
        self._next += 1
        return message_id
