"""Transport-agnostic REST request and its fluent builder.

A ``Request`` is what a client sends: method, path, ordered query
parameters, optional request-scoped credentials and whether it must be
signed. It knows nothing about the HTTP library used to send it.

Design Decisions:
    - Frozen dataclass: a built request is never modified
    - Ordered pairs, not a dict: duplicate keys are legal and meaningful
    - No validation: parameter semantics are the server's concern
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from .credentials import Credentials
from .enums import Method

__all__ = ["Request", "RequestBuilder", "RequestLike", "as_request"]


@dataclass(frozen=True)
class Request:
    """Immutable REST request.

    Attributes:
        method: HTTP method
        path: Path appended to the client's base URL (e.g. ``/api/v3/time``)
        params: Ordered ``(key, value)`` query pairs; duplicates are kept
        credentials: Request-scoped credentials overriding the client's
        sign: Whether ``timestamp`` and ``signature`` must be appended
    """

    method: Method
    path: str
    params: tuple[tuple[str, str], ...] = ()
    credentials: Credentials | None = None
    sign: bool = False


class RequestBuilder:
    """Fluent builder for ``Request``.

    Example:
        >>> request = (
        ...     RequestBuilder(Method.GET, "/api/v3/klines")
        ...     .params([("symbol", "BTCUSDT"), ("interval", "1m")])
        ...     .build()
        ... )
        >>> request.params
        (('symbol', 'BTCUSDT'), ('interval', '1m'))
    """

    def __init__(self, method: Method | str, path: str) -> None:
        self._method = Method(method)
        self._path = path
        self._params: list[tuple[str, str]] = []
        self._credentials: Credentials | None = None
        self._sign = False

    def params(self, params: Iterable[tuple[str, Any]]) -> RequestBuilder:
        """Append query parameters, keeping order and duplicate keys.

        Values are rendered for the wire: enums by value, decimals in plain
        notation, booleans as ``true``/``false``, everything else with ``str``.
        """
        self._params.extend((str(key), _param_value(value)) for key, value in params)
        return self

    def credentials(self, credentials: Credentials) -> RequestBuilder:
        """Set request-scoped credentials (take precedence over the client's)."""
        self._credentials = credentials
        return self

    def sign(self) -> RequestBuilder:
        """Mark the request as requiring a timestamp and signature."""
        self._sign = True
        return self

    def build(self) -> Request:
        """Build the immutable Request."""
        return Request(
            method=self._method,
            path=self._path,
            params=tuple(self._params),
            credentials=self._credentials,
            sign=self._sign,
        )


RequestLike = Union[Request, RequestBuilder]


def as_request(request: RequestLike) -> Request:
    """Finalize a builder, or return a Request unchanged."""
    if isinstance(request, RequestBuilder):
        return request.build()
    if isinstance(request, Request):
        return request
    raise TypeError(f"Expected Request or RequestBuilder, got {type(request).__name__}")


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
