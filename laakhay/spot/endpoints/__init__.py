"""Endpoint request factories and stream name helpers."""

from . import market, streams, trade, user_stream

__all__ = ["market", "trade", "user_stream", "streams"]
