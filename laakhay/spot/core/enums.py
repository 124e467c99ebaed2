"""Core enumerations shared by requests, endpoints and streams.

Key Types:
    - Method: HTTP verbs accepted by the REST API
    - KlineInterval: Candlestick intervals used by klines and kline streams
    - Side, TimeInForce, NewOrderResponseType: Order placement options
"""

from enum import Enum
from typing import Optional

# Conversion mapping
_SECONDS_MAP = {
    "1s": 1,
    "1m": 60,
    "3m": 180,
    "5m": 300,
    "15m": 900,
    "30m": 1800,
    "1h": 3600,
    "2h": 7200,
    "4h": 14400,
    "6h": 21600,
    "8h": 28800,
    "12h": 43200,
    "1d": 86400,
    "3d": 259200,
    "1w": 604800,
    "1M": 2592000,  # 30 days approximation
}


class Method(str, Enum):
    """HTTP method of a REST request.

    The API family is query-parameter driven, so the method is the only
    thing distinguishing e.g. creating, renewing and closing a listen key.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class KlineInterval(str, Enum):
    """Kline/candlestick interval as spelled on the wire."""

    S1 = "1s"

    # Minutes
    M1 = "1m"
    M3 = "3m"
    M5 = "5m"
    M15 = "15m"
    M30 = "30m"

    # Hours
    H1 = "1h"
    H2 = "2h"
    H4 = "4h"
    H6 = "6h"
    H8 = "8h"
    H12 = "12h"

    # Days/Weeks/Months
    D1 = "1d"
    D3 = "3d"
    W1 = "1w"
    MO1 = "1M"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def seconds(self) -> int:
        """Number of seconds in this interval."""
        return _SECONDS_MAP[self.value]

    @property
    def milliseconds(self) -> int:
        """Number of milliseconds in this interval."""
        return self.seconds * 1000

    @classmethod
    def from_str(cls, interval: str) -> Optional["KlineInterval"]:
        """Get interval from string value. Returns None if no match."""
        try:
            return cls(interval)
        except ValueError:
            return None


class Side(str, Enum):
    """Order side."""

    BUY = "BUY"
    SELL = "SELL"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class TimeInForce(str, Enum):
    """How long an order stays active."""

    GTC = "GTC"  # good till cancelled
    IOC = "IOC"  # immediate or cancel
    FOK = "FOK"  # fill or kill

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class NewOrderResponseType(str, Enum):
    """Level of detail in the order placement acknowledgement."""

    ACK = "ACK"
    RESULT = "RESULT"
    FULL = "FULL"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value
