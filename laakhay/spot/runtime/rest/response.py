"""Response wrappers for the blocking and async transports.

Both expose one terminal operation, ``into_body_str``, which drains the body
and either returns its text or raises the typed error for the status code.
The body can only be drained once.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

import aiohttp
import requests

from ...core.exceptions import SendError
from ...core.response import into_text_or_raise

__all__ = ["AsyncResponse", "Response"]


class Response:
    """Blocking response backed by ``requests.Response``."""

    def __init__(self, raw: requests.Response) -> None:
        self._raw = raw
        self._consumed = False

    @property
    def status_code(self) -> int:
        """HTTP status code."""
        return self._raw.status_code

    @property
    def raw(self) -> requests.Response:
        """Underlying ``requests`` response."""
        return self._raw

    def into_body_str(self) -> str:
        """Drain the body; return text on success, raise on 4xx/5xx."""
        if self._consumed:
            raise RuntimeError("Response body has already been consumed")
        self._consumed = True
        try:
            body = self._raw.content
        finally:
            self._raw.close()
        return into_text_or_raise(self._raw.status_code, body, _header_items(self._raw))

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code})"


class AsyncResponse:
    """Async response backed by ``aiohttp.ClientResponse``."""

    def __init__(self, raw: aiohttp.ClientResponse) -> None:
        self._raw = raw
        self._consumed = False

    @property
    def status_code(self) -> int:
        """HTTP status code."""
        return self._raw.status

    @property
    def raw(self) -> aiohttp.ClientResponse:
        """Underlying ``aiohttp`` response."""
        return self._raw

    async def into_body_str(self) -> str:
        """Drain the body; return text on success, raise on 4xx/5xx.

        Raises:
            SendError: The connection failed while the body was being read
        """
        if self._consumed:
            raise RuntimeError("Response body has already been consumed")
        self._consumed = True
        try:
            body = await self._raw.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise SendError(f"Reading response body failed: {exc!r}") from exc
        finally:
            self._raw.release()
        return into_text_or_raise(self._raw.status, body, self._raw.headers.items())

    def __repr__(self) -> str:
        return f"AsyncResponse(status_code={self.status_code})"


def _header_items(raw: requests.Response) -> Iterable[tuple[str, str]]:
    # requests folds repeated headers into one comma-joined value; urllib3
    # still has each occurrence.
    original = getattr(raw.raw, "headers", None)
    if original is not None and hasattr(original, "iteritems"):
        return original.iteritems()
    return raw.headers.items()
