"""Stream name helpers.

Market stream names are ``<lower-cased symbol>@<suffix>``. A user data
stream is named by its listen key alone.
"""

from __future__ import annotations

from ..core.enums import KlineInterval
from ..runtime.ws.protocol import Stream


def kline_stream(symbol: str, interval: KlineInterval | str) -> Stream:
    """``<symbol>@kline_<interval>``."""
    return Stream(f"{symbol.lower()}@kline_{KlineInterval(interval).value}")


def trade_stream(symbol: str) -> Stream:
    """``<symbol>@trade``."""
    return Stream(f"{symbol.lower()}@trade")


def agg_trade_stream(symbol: str) -> Stream:
    """``<symbol>@aggTrade``."""
    return Stream(f"{symbol.lower()}@aggTrade")


def diff_depth_stream(symbol: str, fast: bool = False) -> Stream:
    """``<symbol>@depth`` (1000ms) or ``<symbol>@depth@100ms``."""
    name = f"{symbol.lower()}@depth"
    return Stream(f"{name}@100ms" if fast else name)


def book_ticker_stream(symbol: str) -> Stream:
    """``<symbol>@bookTicker``."""
    return Stream(f"{symbol.lower()}@bookTicker")


def user_data_stream(listen_key: str) -> Stream:
    """Stream carrying account updates for ``listen_key``."""
    return Stream(listen_key)
