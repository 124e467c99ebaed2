#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json

from laakhay.spot import AsyncSpotHTTPClient
from laakhay.spot.endpoints import market


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch Binance Spot order books concurrently")
    p.add_argument("symbols", nargs="*", default=["BTCUSDT", "ETHUSDT", "BNBUSDT"])
    p.add_argument("--limit", type=int, default=5)
    return p.parse_args()


async def fetch(client: AsyncSpotHTTPClient, symbol: str, limit: int) -> dict:
    response = await client.send(market.depth(symbol, limit=limit))
    return json.loads(await response.into_body_str())


async def main() -> None:
    args = parse_args()
    async with AsyncSpotHTTPClient() as client:
        books = await asyncio.gather(*(fetch(client, s, args.limit) for s in args.symbols))

    for symbol, book in zip(args.symbols, books):
        best_bid = book["bids"][0][0] if book["bids"] else "-"
        best_ask = book["asks"][0][0] if book["asks"] else "-"
        print(f"{symbol:10} bid={best_bid:>14} ask={best_ask:>14} update={book['lastUpdateId']}")


if __name__ == "__main__":
    asyncio.run(main())
