"""Query-string and signing pipeline shared by every transport.

``prepare_request`` turns a ``Request`` plus client-level settings into the
final method, URL and headers. Blocking and async clients both call it and
only differ in how the prepared request is dispatched.

Pipeline:
    1. URL = base URL + path
    2. Form-encode params in order; duplicate keys stay separate entries
    3. Resolve credentials: request-level first, then client-level
    4. Headers: ``User-Agent`` always, ``X-MBX-APIKEY`` when credentials resolve
    5. Signed requests: append ``timestamp``, sign the whole query string,
       append the form-encoded ``signature`` last

Every failure here is raised before anything goes on the wire.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from urllib.parse import quote_plus, urlencode, urlsplit

from ..version import __version__
from . import clock
from .credentials import Credentials
from .enums import Method
from .exceptions import MissingCredentialsError, ParseError
from .request import RequestLike, as_request
from .signing import sign

__all__ = [
    "API_KEY_HEADER",
    "USER_AGENT",
    "PreparedRequest",
    "build_query",
    "encode_params",
    "prepare_request",
    "resolve_credentials",
]

API_KEY_HEADER = "X-MBX-APIKEY"
USER_AGENT = f"laakhay-spot/{__version__}"


@dataclass(frozen=True)
class PreparedRequest:
    """Fully assembled request, ready for a transport.

    The body is always empty: this API family is driven by query parameters.
    """

    method: Method
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)


def encode_params(params: Iterable[tuple[str, str]]) -> str:
    """Form-encode ordered pairs (``a=1&a=2``); no folding of duplicate keys."""
    return urlencode(list(params))


def resolve_credentials(
    request_credentials: Credentials | None,
    client_credentials: Credentials | None,
) -> Credentials | None:
    """Request-level credentials override client-level defaults."""
    return request_credentials if request_credentials is not None else client_credentials


def build_query(
    params: Iterable[tuple[str, str]],
    *,
    credentials: Credentials | None = None,
    signed: bool = False,
    timestamp_delta: int = 0,
) -> str:
    """Build the final query string, signing it when requested.

    Args:
        params: Ordered request parameters
        credentials: Resolved credentials, if any
        signed: Whether to append ``timestamp`` and ``signature``
        timestamp_delta: Milliseconds subtracted from the local clock

    Raises:
        MissingCredentialsError: If ``signed`` and no credentials resolved
        InvalidApiSecretError: If the key material cannot sign
    """
    query = encode_params(params)
    if not signed:
        return query
    if credentials is None:
        raise MissingCredentialsError(
            "Request must be signed but neither the request nor the client has credentials"
        )

    timestamp = clock.current_millis() - timestamp_delta
    query = f"{query}&timestamp={timestamp}" if query else f"timestamp={timestamp}"
    signature = sign(query, credentials.signature)
    return f"{query}&signature={quote_plus(signature, safe='')}"


def prepare_request(
    request: RequestLike,
    *,
    base_url: str,
    client_credentials: Credentials | None = None,
    timestamp_delta: int = 0,
) -> PreparedRequest:
    """Assemble method, URL and headers for ``request``.

    Args:
        request: Request (or builder) to prepare
        base_url: Scheme and host, e.g. ``https://api.binance.com``
        client_credentials: Client-level default credentials
        timestamp_delta: Clock-skew correction for signed requests

    Raises:
        ParseError: If the URL or a header value is malformed
        MissingCredentialsError: If signing is required without credentials
        InvalidApiSecretError: If signing fails
    """
    request = as_request(request)
    target = f"{base_url}{request.path}"
    _check_url(target)

    credentials = resolve_credentials(request.credentials, client_credentials)
    headers = {"User-Agent": USER_AGENT}
    if credentials is not None:
        headers[API_KEY_HEADER] = credentials.api_key.get_secret_value()
    _check_headers(headers)

    query = build_query(
        request.params,
        credentials=credentials,
        signed=request.sign,
        timestamp_delta=timestamp_delta,
    )
    url = f"{target}?{query}" if query else target
    return PreparedRequest(method=request.method, url=url, headers=headers)


def _check_url(url: str) -> None:
    if any(ch.isspace() or not ch.isprintable() for ch in url):
        raise ParseError(f"URL contains whitespace or control characters: {url!r}")
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise ParseError(f"Invalid URL: {url!r}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ParseError(f"URL must be absolute http(s): {url!r}")


def _check_headers(headers: Mapping[str, str]) -> None:
    for name, value in headers.items():
        if not value.isascii() or not value.isprintable():
            # Never echo the value: it may be the API key.
            raise ParseError(f"Invalid value for header {name}")
