"""Unit tests for clock helpers."""

import time

from laakhay.spot.core.clock import current_millis, timestamp_delta


def test_current_millis_is_unix_milliseconds():
    """Test current_millis tracks time.time() in milliseconds."""
    before = int(time.time() * 1000)
    now = current_millis()
    after = int(time.time() * 1000)
    assert before - 1 <= now <= after + 1


def test_timestamp_delta_positive_when_local_ahead():
    """Local clock ahead of the server yields a positive delta."""
    assert timestamp_delta(1_000_000, 1_000_250) == 250


def test_timestamp_delta_negative_when_local_behind():
    """Test local clock behind the server."""
    assert timestamp_delta(1_000_000, 999_900) == -100


def test_timestamp_delta_defaults_to_now():
    """Without a local time the current clock is used."""
    server = current_millis() - 5_000
    delta = timestamp_delta(server)
    assert 5_000 <= delta < 10_000
