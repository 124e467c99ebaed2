"""Public market data endpoints (no API key required).

Each factory returns a ``RequestBuilder``; pass it straight to a client.

Example:
    >>> from laakhay.spot.core import KlineInterval
    >>> request = klines("BTCUSDT", KlineInterval.M1, limit=10).build()
    >>> request.path
    '/api/v3/klines'
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..core.enums import KlineInterval, Method
from ..core.request import RequestBuilder
from .common import endpoint


def ping() -> RequestBuilder:
    """``GET /api/v3/ping``: connectivity check."""
    return endpoint(Method.GET, "/api/v3/ping")


def server_time() -> RequestBuilder:
    """``GET /api/v3/time``: current server time as ``{"serverTime": ms}``."""
    return endpoint(Method.GET, "/api/v3/time")


def exchange_info(
    symbol: str | None = None,
    symbols: Sequence[str] | None = None,
) -> RequestBuilder:
    """``GET /api/v3/exchangeInfo``: trading rules and symbol information.

    ``symbols`` is sent as a JSON array, e.g. ``["BTCUSDT","BNBBTC"]``.
    """
    return endpoint(
        Method.GET,
        "/api/v3/exchangeInfo",
        [
            ("symbol", symbol),
            ("symbols", json.dumps(list(symbols), separators=(",", ":")) if symbols else None),
        ],
    )


def depth(symbol: str, limit: int | None = None) -> RequestBuilder:
    """``GET /api/v3/depth``: order book snapshot."""
    return endpoint(Method.GET, "/api/v3/depth", [("symbol", symbol), ("limit", limit)])


def klines(
    symbol: str,
    interval: KlineInterval | str,
    *,
    start_time: int | None = None,
    end_time: int | None = None,
    limit: int | None = None,
) -> RequestBuilder:
    """``GET /api/v3/klines``: candlesticks, identified by their open time.

    Without ``start_time``/``end_time`` the most recent klines are returned.
    Times are unix milliseconds.
    """
    return endpoint(
        Method.GET,
        "/api/v3/klines",
        [
            ("symbol", symbol),
            ("interval", KlineInterval(interval)),
            ("startTime", start_time),
            ("endTime", end_time),
            ("limit", limit),
        ],
    )


def avg_price(symbol: str) -> RequestBuilder:
    """``GET /api/v3/avgPrice``: current average price."""
    return endpoint(Method.GET, "/api/v3/avgPrice", [("symbol", symbol)])
