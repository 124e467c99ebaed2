"""User data stream listen keys.

These endpoints need the API key header but no signature. A listen key
expires after 60 minutes unless renewed.
"""

from __future__ import annotations

from ..core.credentials import Credentials
from ..core.enums import Method
from ..core.request import RequestBuilder
from .common import endpoint

USER_DATA_STREAM_PATH = "/api/v3/userDataStream"


def new_listen_key(credentials: Credentials | None = None) -> RequestBuilder:
    """``POST /api/v3/userDataStream``: open a user data stream."""
    return endpoint(Method.POST, USER_DATA_STREAM_PATH, credentials=credentials)


def renew_listen_key(listen_key: str, credentials: Credentials | None = None) -> RequestBuilder:
    """``PUT /api/v3/userDataStream``: keep a listen key alive for 60 more minutes."""
    return endpoint(
        Method.PUT,
        USER_DATA_STREAM_PATH,
        [("listenKey", listen_key)],
        credentials=credentials,
    )


def close_listen_key(listen_key: str, credentials: Credentials | None = None) -> RequestBuilder:
    """``DELETE /api/v3/userDataStream``: close a user data stream."""
    return endpoint(
        Method.DELETE,
        USER_DATA_STREAM_PATH,
        [("listenKey", listen_key)],
        credentials=credentials,
    )
