"""Unit tests for SpotHTTPClient and AsyncSpotHTTPClient.

Transports are mocked; the send pipeline, credential precedence and error
classification run for real.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests

from laakhay.spot.config import BASE_URL
from laakhay.spot.core.credentials import Credentials
from laakhay.spot.core.enums import Method
from laakhay.spot.core.exceptions import (
    MissingCredentialsError,
    RawClientError,
    ServerError,
    StructuredClientError,
)
from laakhay.spot.core.pipeline import API_KEY_HEADER
from laakhay.spot.core.request import RequestBuilder
from laakhay.spot.runtime.rest.client import AsyncSpotHTTPClient, SpotHTTPClient
from laakhay.spot.runtime.rest.transport import RequestsTransport

NOW_MS = 1_700_000_000_000


def requests_response(status: int, body: bytes) -> requests.Response:
    raw = requests.Response()
    raw.status_code = status
    raw._content = body
    raw._content_consumed = True
    return raw


def client_with(status: int, body: bytes, **kwargs) -> tuple[SpotHTTPClient, MagicMock]:
    session = MagicMock(spec=requests.Session)
    session.request.return_value = requests_response(status, body)
    client = SpotHTTPClient(
        "http://localhost:8080", transport=RequestsTransport(session=session), **kwargs
    )
    return client, session


def sent_query(session: MagicMock) -> dict[str, str]:
    url = session.request.call_args.args[1]
    return dict(parse_qsl(urlsplit(url).query))


def path_request() -> RequestBuilder:
    return RequestBuilder(Method.GET, "/path").params([("testparam", "testvalue")])


class TestSpotHTTPClientSend:
    """End-to-end send through a mocked requests session."""

    def test_basic_get(self):
        """Test an unsigned GET without credentials."""
        client, session = client_with(200, b"Test Response")
        body = client.send(path_request()).into_body_str()

        assert body == "Test Response"
        method, url = session.request.call_args.args
        assert method == "GET"
        assert url == "http://localhost:8080/path?testparam=testvalue"
        assert API_KEY_HEADER not in session.request.call_args.kwargs["headers"]

    def test_credentials_header_without_signature(self):
        """Test the API key header is sent but nothing is signed."""
        creds = Credentials.from_hmac("api-key", "api-secret")
        client, session = client_with(200, b"Test Response", credentials=creds)
        client.send(path_request()).into_body_str()

        assert session.request.call_args.kwargs["headers"][API_KEY_HEADER] == "api-key"
        assert "signature" not in sent_query(session)
        assert "timestamp" not in sent_query(session)

    def test_signed_request(self):
        """Test signed requests carry timestamp and signature."""
        creds = Credentials.from_hmac("api-key", "api-secret")
        client, session = client_with(200, b"Test Response", credentials=creds)
        client.send(path_request().sign()).into_body_str()

        query = sent_query(session)
        assert query["testparam"] == "testvalue"
        assert "timestamp" in query
        assert "signature" in query

    def test_signed_without_credentials(self):
        """Test nothing is sent when signing cannot happen."""
        client, session = client_with(200, b"")
        with pytest.raises(MissingCredentialsError):
            client.send(path_request().sign())
        session.request.assert_not_called()

    def test_404_empty_body(self):
        """Test 404 with an empty body."""
        client, _ = client_with(404, b"")
        with pytest.raises(RawClientError) as exc_info:
            client.send(path_request()).into_body_str()
        assert exc_info.value.status_code == 404

    def test_400_structured(self):
        """Test 400 with the documented error body."""
        body = (
            b'{ "code": -1102, "msg": "Mandatory parameter \'symbol\' was not sent, '
            b'was empty/null, or malformed." }'
        )
        client, _ = client_with(400, body)
        with pytest.raises(StructuredClientError) as exc_info:
            client.send(path_request()).into_body_str()
        assert exc_info.value.code == -1102

    def test_400_raw(self):
        """Test 400 with a plain body."""
        client, _ = client_with(400, b"Error")
        with pytest.raises(RawClientError) as exc_info:
            client.send(path_request()).into_body_str()
        assert exc_info.value.body == "Error"

    def test_500(self):
        """Test 500 is a ServerError."""
        client, _ = client_with(500, b"Error")
        with pytest.raises(ServerError) as exc_info:
            client.send(path_request()).into_body_str()
        assert exc_info.value.body == "Error"

    def test_send_does_not_raise_on_error_status(self):
        """Errors surface on body consumption, not on send."""
        client, _ = client_with(503, b"Error")
        response = client.send(path_request())
        assert response.status_code == 503


class TestSpotHTTPClientSettings:
    """Test client defaults and derived clients."""

    def test_defaults(self):
        """Test the production base URL and no credentials by default."""
        client = SpotHTTPClient()
        assert client.base_url == BASE_URL
        assert client.credentials is None
        assert client.timestamp_delta == 0
        assert isinstance(client.transport, RequestsTransport)

    def test_with_credentials_returns_copy(self):
        """Test the original client is left untouched."""
        client = SpotHTTPClient(transport=MagicMock())
        creds = Credentials.from_hmac("k", "s")
        derived = client.with_credentials(creds)
        assert derived is not client
        assert derived.credentials is creds
        assert client.credentials is None
        assert derived.transport is client.transport

    def test_with_timestamp_delta(self):
        """Test the delta is applied to signed timestamps."""
        transport = MagicMock()
        client = SpotHTTPClient(
            "http://localhost", transport=transport, credentials=Credentials.from_hmac("k", "s")
        ).with_timestamp_delta(300)
        with patch("laakhay.spot.core.clock.current_millis", return_value=NOW_MS):
            client.send(RequestBuilder(Method.GET, "/path").sign())

        url = transport.issue.call_args.args[1]
        assert dict(parse_qsl(urlsplit(url).query))["timestamp"] == str(NOW_MS - 300)

    def test_fetch_timestamp_delta(self):
        """Test local minus server time is measured against /api/v3/time."""
        transport = MagicMock()
        transport.issue.return_value.into_body_str.return_value = '{"serverTime": 1000}'
        client = SpotHTTPClient("http://localhost", transport=transport)
        with patch("laakhay.spot.runtime.rest.client.current_millis", return_value=1500):
            assert client.fetch_timestamp_delta() == 500
        assert transport.issue.call_args.args[:2] == ("GET", "http://localhost/api/v3/time")

    def test_repr_hides_credentials(self):
        """Test repr reports only whether credentials are set."""
        client = SpotHTTPClient(
            transport=MagicMock(), credentials=Credentials.from_hmac("secret-key", "s")
        )
        assert "secret-key" not in repr(client)
        assert "authenticated=True" in repr(client)

    def test_context_manager_closes_transport(self):
        """Test leaving the context closes the transport."""
        transport = MagicMock()
        with SpotHTTPClient(transport=transport):
            pass
        transport.close.assert_called_once()


class TestAsyncSpotHTTPClient:
    """Test the async client against a mocked transport."""

    def _transport(self, body: str = "") -> MagicMock:
        response = MagicMock()
        response.status_code = 200
        response.into_body_str = AsyncMock(return_value=body)
        transport = MagicMock()
        transport.issue = AsyncMock(return_value=response)
        transport.close = AsyncMock()
        return transport

    @pytest.mark.asyncio
    async def test_send(self):
        """Test the prepared request is dispatched through the transport."""
        transport = self._transport("Test Response")
        client = AsyncSpotHTTPClient("http://localhost:8080", transport=transport)

        response = await client.send(path_request())

        assert await response.into_body_str() == "Test Response"
        method, url, headers = transport.issue.call_args.args
        assert method == "GET"
        assert url == "http://localhost:8080/path?testparam=testvalue"
        assert API_KEY_HEADER not in headers

    @pytest.mark.asyncio
    async def test_request_credentials_override_client(self):
        """Test request-scoped credentials win over the client's."""
        transport = self._transport()
        client = AsyncSpotHTTPClient(
            "http://localhost",
            transport=transport,
            credentials=Credentials.from_hmac("client-key", "s"),
        )
        request = path_request().credentials(Credentials.from_hmac("request-key", "s")).sign()
        await client.send(request)

        headers = transport.issue.call_args.args[2]
        assert headers[API_KEY_HEADER] == "request-key"

    @pytest.mark.asyncio
    async def test_signed_without_credentials(self):
        """Test nothing is sent when signing cannot happen."""
        transport = self._transport()
        client = AsyncSpotHTTPClient("http://localhost", transport=transport)
        with pytest.raises(MissingCredentialsError):
            await client.send(path_request().sign())
        transport.issue.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_timestamp_delta(self):
        """Test the async clock-skew measurement."""
        transport = self._transport('{"serverTime": 2000}')
        client = AsyncSpotHTTPClient("http://localhost", transport=transport)
        with patch("laakhay.spot.runtime.rest.client.current_millis", return_value=1900):
            assert await client.fetch_timestamp_delta() == -100

    @pytest.mark.asyncio
    async def test_context_manager_closes_transport(self):
        """Test leaving the context closes the transport."""
        transport = self._transport()
        async with AsyncSpotHTTPClient(transport=transport):
            pass
        transport.close.assert_awaited_once()
