"""Account and order endpoints (signed).

All factories here produce signed requests. Credentials can be attached per
request, otherwise the client's default credentials are used.
"""

from __future__ import annotations

from decimal import Decimal

from ..core.credentials import Credentials
from ..core.enums import Method, NewOrderResponseType, Side, TimeInForce
from ..core.request import RequestBuilder
from .common import endpoint


def account(
    *,
    recv_window: int | None = None,
    credentials: Credentials | None = None,
) -> RequestBuilder:
    """``GET /api/v3/account``: balances and permissions."""
    return endpoint(
        Method.GET,
        "/api/v3/account",
        [("recvWindow", recv_window)],
        credentials=credentials,
        signed=True,
    )


def new_order(
    symbol: str,
    side: Side | str,
    order_type: str,
    *,
    time_in_force: TimeInForce | str | None = None,
    quantity: Decimal | None = None,
    quote_order_qty: Decimal | None = None,
    price: Decimal | None = None,
    new_client_order_id: str | None = None,
    stop_price: Decimal | None = None,
    trailing_delta: int | None = None,
    iceberg_qty: Decimal | None = None,
    new_order_resp_type: NewOrderResponseType | str | None = None,
    recv_window: int | None = None,
    credentials: Credentials | None = None,
) -> RequestBuilder:
    """``POST /api/v3/order``: place an order.

    Which optional parameters are mandatory depends on ``order_type``
    (``LIMIT`` needs ``time_in_force``, ``quantity`` and ``price``); the
    server enforces this.
    """
    return endpoint(
        Method.POST,
        "/api/v3/order",
        [
            ("symbol", symbol),
            ("side", Side(side)),
            ("type", order_type),
            ("timeInForce", time_in_force),
            ("quantity", quantity),
            ("quoteOrderQty", quote_order_qty),
            ("price", price),
            ("newClientOrderId", new_client_order_id),
            ("stopPrice", stop_price),
            ("trailingDelta", trailing_delta),
            ("icebergQty", iceberg_qty),
            ("newOrderRespType", new_order_resp_type),
            ("recvWindow", recv_window),
        ],
        credentials=credentials,
        signed=True,
    )


def get_order(
    symbol: str,
    *,
    order_id: int | None = None,
    orig_client_order_id: str | None = None,
    recv_window: int | None = None,
    credentials: Credentials | None = None,
) -> RequestBuilder:
    """``GET /api/v3/order``: order status by id or client order id."""
    return endpoint(
        Method.GET,
        "/api/v3/order",
        [
            ("symbol", symbol),
            ("orderId", order_id),
            ("origClientOrderId", orig_client_order_id),
            ("recvWindow", recv_window),
        ],
        credentials=credentials,
        signed=True,
    )


def cancel_order(
    symbol: str,
    *,
    order_id: int | None = None,
    orig_client_order_id: str | None = None,
    new_client_order_id: str | None = None,
    recv_window: int | None = None,
    credentials: Credentials | None = None,
) -> RequestBuilder:
    """``DELETE /api/v3/order``: cancel an active order."""
    return endpoint(
        Method.DELETE,
        "/api/v3/order",
        [
            ("symbol", symbol),
            ("orderId", order_id),
            ("origClientOrderId", orig_client_order_id),
            ("newClientOrderId", new_client_order_id),
            ("recvWindow", recv_window),
        ],
        credentials=credentials,
        signed=True,
    )
