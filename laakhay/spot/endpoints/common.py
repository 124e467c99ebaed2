"""Helpers shared by endpoint factories."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..core.credentials import Credentials
from ..core.enums import Method
from ..core.request import RequestBuilder


def present(pairs: Iterable[tuple[str, Any]]) -> list[tuple[str, Any]]:
    """Drop optional parameters that were not given."""
    return [(key, value) for key, value in pairs if value is not None]


def endpoint(
    method: Method,
    path: str,
    params: Iterable[tuple[str, Any]] = (),
    *,
    credentials: Credentials | None = None,
    signed: bool = False,
) -> RequestBuilder:
    """Start a builder for ``path`` with the given optional parameters."""
    builder = RequestBuilder(method, path).params(present(params))
    if credentials is not None:
        builder.credentials(credentials)
    if signed:
        builder.sign()
    return builder
