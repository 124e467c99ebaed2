"""Custom exception hierarchy.

Local failures (bad key material, missing credentials, malformed URL) are
raised before anything is sent. Remote failures are raised when a response
body is consumed, never by the send step itself.
"""

from __future__ import annotations


class SpotError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidApiSecretError(SpotError):
    """Signing key material is malformed or of the wrong type.

    Raised while signing; the request is never sent.
    """

    pass


class MissingCredentialsError(SpotError):
    """A signed request was sent without request- or client-level credentials."""

    pass


class ParseError(SpotError):
    """The request URL or headers could not be assembled."""

    pass


class SendError(SpotError):
    """Transport-level failure (DNS, TCP, TLS, transport-enforced timeout).

    The original transport exception is chained as ``__cause__``.
    """

    pass


class HttpError(SpotError):
    """Non-success HTTP response.

    Attributes:
        status_code: HTTP status code
        headers: Response headers, lower-cased, first occurrence wins
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers or {}


class ClientError(HttpError):
    """The server rejected the request (4xx)."""

    pass


class StructuredClientError(ClientError):
    """4xx response whose body follows the ``{"code", "msg"}`` error schema."""

    def __init__(
        self,
        *,
        code: int,
        message: str,
        status_code: int,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(f"[{code}] {message}", status_code=status_code, headers=headers)
        self.code = code
        self.message = message


class RawClientError(ClientError):
    """4xx response with a body outside the error schema."""

    def __init__(
        self,
        *,
        body: str,
        status_code: int,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(
            f"HTTP {status_code}: {body}" if body else f"HTTP {status_code}",
            status_code=status_code,
            headers=headers,
        )
        self.body = body


class ServerError(HttpError):
    """Remote-side failure (5xx). The body is kept verbatim."""

    def __init__(
        self,
        *,
        body: str,
        status_code: int,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(
            f"HTTP {status_code}: {body}" if body else f"HTTP {status_code}",
            status_code=status_code,
            headers=headers,
        )
        self.body = body
