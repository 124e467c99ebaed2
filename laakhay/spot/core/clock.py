"""Clock helpers for signed requests.

Signed requests carry the local time in milliseconds. When the local clock
drifts from the server's, clients subtract a pre-measured delta so the
timestamp lands inside the server's ``recvWindow``.
"""

from __future__ import annotations

import time

__all__ = ["current_millis", "timestamp_delta"]


def current_millis() -> int:
    """Current unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def timestamp_delta(server_time_ms: int, local_time_ms: int | None = None) -> int:
    """Delta to configure on a client so that ``local - delta == server``.

    Args:
        server_time_ms: ``serverTime`` as returned by ``GET /api/v3/time``
        local_time_ms: Local time of the measurement (defaults to now)

    Returns:
        Local clock minus server clock, in milliseconds. Positive when the
        local clock runs ahead.
    """
    if local_time_ms is None:
        local_time_ms = current_millis()
    return local_time_ms - server_time_ms
