#!/usr/bin/env python3
"""Blocking kline stream with a mid-stream unsubscribe."""

from __future__ import annotations

import argparse
import json

from laakhay.spot import WebSocketConnection
from laakhay.spot.endpoints import streams


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Binance Spot klines (blocking client)")
    p.add_argument("symbol", nargs="?", default="BTCUSDT")
    p.add_argument("interval", nargs="?", default="1m")
    p.add_argument("--count", type=int, default=10)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    stream = streams.kline_stream(args.symbol, args.interval)
    with WebSocketConnection.connect() as conn:
        conn.subscribe([stream])
        list_id = conn.subscriptions()

        seen = 0
        while seen < args.count:
            message = json.loads(conn.recv(timeout=30))
            if message.get("id") == list_id:
                print(f"Active streams: {message['result']}")
                continue
            if "data" not in message:
                continue
            k = message["data"]["k"]
            print(f"{k['t']} o={k['o']} h={k['h']} l={k['l']} c={k['c']} closed={k['x']}")
            seen += 1

        conn.unsubscribe([stream])


if __name__ == "__main__":
    main()
