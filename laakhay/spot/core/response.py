"""Status-based classification of REST responses.

Transport-specific response wrappers read the raw body and hand it here
together with the status code and header pairs.

Policy:
    - status < 400: success, body returned as UTF-8 text
    - 400 <= status < 500: client error, structured if the body matches
      ``{"code": int16, "msg": str}``, raw otherwise
    - status >= 500: server error, body kept raw and never parsed
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import RawClientError, ServerError, StructuredClientError

__all__ = ["ApiErrorPayload", "into_text_or_raise", "snapshot_headers"]


class ApiErrorPayload(BaseModel):
    """Documented error body of the REST API."""

    code: int = Field(..., ge=-32768, le=32767)
    msg: str

    model_config = ConfigDict(frozen=True, strict=True)


def snapshot_headers(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Copy header pairs into a dict with lower-cased names.

    When a name repeats, the first occurrence wins.
    """
    headers: dict[str, str] = {}
    for name, value in items:
        headers.setdefault(name.lower(), value)
    return headers


def into_text_or_raise(
    status: int,
    body: bytes,
    header_items: Iterable[tuple[str, str]],
) -> str:
    """Return the body text, or raise the typed error for ``status``.

    Raises:
        StructuredClientError: 4xx with a schema-conforming body
        RawClientError: 4xx with any other body
        ServerError: 5xx
        UnicodeDecodeError: If the body is not UTF-8; the API always emits
            UTF-8, so this is a defect rather than part of the taxonomy
    """
    content = body.decode("utf-8")
    if status < 400:
        return content

    headers = snapshot_headers(header_items)
    if status >= 500:
        raise ServerError(body=content, status_code=status, headers=headers)

    try:
        payload = ApiErrorPayload.model_validate_json(content)
    except ValidationError:
        raise RawClientError(body=content, status_code=status, headers=headers) from None
    raise StructuredClientError(
        code=payload.code,
        message=payload.msg,
        status_code=status,
        headers=headers,
    )
