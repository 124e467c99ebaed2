"""Unit tests for listen key endpoints."""

from laakhay.spot.core.credentials import Credentials
from laakhay.spot.core.enums import Method
from laakhay.spot.endpoints import user_stream


def test_listen_key_lifecycle_methods():
    """Create, renew and close share a path and differ by method."""
    created = user_stream.new_listen_key().build()
    renewed = user_stream.renew_listen_key("abc").build()
    closed = user_stream.close_listen_key("abc").build()

    assert {created.path, renewed.path, closed.path} == {"/api/v3/userDataStream"}
    assert (created.method, renewed.method, closed.method) == (
        Method.POST,
        Method.PUT,
        Method.DELETE,
    )
    assert created.params == ()
    assert renewed.params == closed.params == (("listenKey", "abc"),)


def test_listen_keys_are_not_signed():
    """Test these endpoints need the key header only."""
    creds = Credentials.from_hmac("k", "s")
    request = user_stream.new_listen_key(creds).build()
    assert request.sign is False
    assert request.credentials is creds
