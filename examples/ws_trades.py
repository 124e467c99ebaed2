#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json

from laakhay.spot import AsyncWebSocketConnection
from laakhay.spot.endpoints import streams


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Binance Spot trades over WebSocket")
    p.add_argument("symbols", nargs="*", default=["BTCUSDT"])
    p.add_argument("--count", type=int, default=20, help="Messages to print before exiting")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with await AsyncWebSocketConnection.connect() as conn:
        sub_id = await conn.subscribe([streams.trade_stream(s) for s in args.symbols])
        print(f"Subscribed (id={sub_id})")

        seen = 0
        async for raw in conn:
            message = json.loads(raw)
            if "id" in message:
                print(f"ack id={message['id']} result={message.get('result')}")
                continue
            trade = message["data"]
            print(f"{message['stream']:20} price={trade['p']:>14} qty={trade['q']:>12}")
            seen += 1
            if seen >= args.count:
                break


if __name__ == "__main__":
    asyncio.run(main())
