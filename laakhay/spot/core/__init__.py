"""Core components."""

from .clock import current_millis, timestamp_delta
from .credentials import (
    Credentials,
    Ed25519Signature,
    HmacSignature,
    RsaSignature,
    SignatureStrategy,
)
from .enums import KlineInterval, Method, NewOrderResponseType, Side, TimeInForce
from .exceptions import (
    ClientError,
    HttpError,
    InvalidApiSecretError,
    MissingCredentialsError,
    ParseError,
    RawClientError,
    SendError,
    ServerError,
    SpotError,
    StructuredClientError,
)
from .pipeline import (
    API_KEY_HEADER,
    USER_AGENT,
    PreparedRequest,
    build_query,
    encode_params,
    prepare_request,
    resolve_credentials,
)
from .request import Request, RequestBuilder, RequestLike, as_request
from .response import ApiErrorPayload, into_text_or_raise, snapshot_headers
from .signing import sign

__all__ = [
    # Enums
    "Method",
    "KlineInterval",
    "Side",
    "TimeInForce",
    "NewOrderResponseType",
    # Credentials
    "Credentials",
    "HmacSignature",
    "RsaSignature",
    "Ed25519Signature",
    "SignatureStrategy",
    "sign",
    # Requests
    "Request",
    "RequestBuilder",
    "RequestLike",
    "as_request",
    # Pipeline
    "API_KEY_HEADER",
    "USER_AGENT",
    "PreparedRequest",
    "build_query",
    "encode_params",
    "prepare_request",
    "resolve_credentials",
    # Responses
    "ApiErrorPayload",
    "into_text_or_raise",
    "snapshot_headers",
    # Clock
    "current_millis",
    "timestamp_delta",
    # Exceptions
    "SpotError",
    "InvalidApiSecretError",
    "MissingCredentialsError",
    "ParseError",
    "SendError",
    "HttpError",
    "ClientError",
    "StructuredClientError",
    "RawClientError",
    "ServerError",
]
