"""Unit tests for account and order endpoint factories."""

from decimal import Decimal

from laakhay.spot.core.credentials import Credentials
from laakhay.spot.core.enums import Method, NewOrderResponseType, Side, TimeInForce
from laakhay.spot.endpoints import trade


class TestTradeEndpoints:
    """Signed endpoints."""

    def test_account(self):
        """Test account is a signed GET."""
        request = trade.account(recv_window=5000).build()
        assert request.method is Method.GET
        assert request.path == "/api/v3/account"
        assert request.sign is True
        assert request.params == (("recvWindow", "5000"),)

    def test_new_limit_order(self):
        """Test order params match the documented example order."""
        request = trade.new_order(
            "LTCBTC",
            Side.BUY,
            "LIMIT",
            time_in_force=TimeInForce.GTC,
            quantity=Decimal("1"),
            price=Decimal("0.1"),
            recv_window=5000,
        ).build()
        assert request.method is Method.POST
        assert request.path == "/api/v3/order"
        assert request.sign is True
        assert request.params == (
            ("symbol", "LTCBTC"),
            ("side", "BUY"),
            ("type", "LIMIT"),
            ("timeInForce", "GTC"),
            ("quantity", "1"),
            ("price", "0.1"),
            ("recvWindow", "5000"),
        )

    def test_new_market_order_by_quote(self):
        """Test unset optionals are left out."""
        request = trade.new_order(
            "BTCUSDT",
            "SELL",
            "MARKET",
            quote_order_qty=Decimal("25.5"),
            new_order_resp_type=NewOrderResponseType.FULL,
        ).build()
        assert request.params == (
            ("symbol", "BTCUSDT"),
            ("side", "SELL"),
            ("type", "MARKET"),
            ("quoteOrderQty", "25.5"),
            ("newOrderRespType", "FULL"),
        )

    def test_get_order(self):
        request = trade.get_order("BTCUSDT", order_id=42).build()
        assert request.method is Method.GET
        assert request.params == (("symbol", "BTCUSDT"), ("orderId", "42"))
        assert request.sign is True

    def test_cancel_order(self):
        """Test cancel is a signed DELETE."""
        request = trade.cancel_order("BTCUSDT", orig_client_order_id="my-order").build()
        assert request.method is Method.DELETE
        assert request.path == "/api/v3/order"
        assert request.params == (("symbol", "BTCUSDT"), ("origClientOrderId", "my-order"))

    def test_request_scoped_credentials(self):
        """Test credentials can be attached per request."""
        creds = Credentials.from_hmac("k", "s")
        assert trade.account(credentials=creds).build().credentials is creds
        assert trade.account().build().credentials is None
