#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from datetime import datetime, timezone

from laakhay.spot import SpotHTTPClient
from laakhay.spot.endpoints import market


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch recent Binance Spot klines via REST")
    p.add_argument("symbol", nargs="?", default="BTCUSDT")
    p.add_argument("interval", nargs="?", default="1m")
    p.add_argument("limit", nargs="?", type=int, default=10)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    with SpotHTTPClient() as client:
        body = client.send(market.klines(args.symbol, args.interval, limit=args.limit)).into_body_str()

    rows = json.loads(body)
    print("=" * 83)
    print(f"Symbol   : {args.symbol}")
    print(f"Interval : {args.interval}")
    print(f"Klines   : {len(rows)}")
    print("=" * 83)
    print(f"{'Open time':25} | {'Open':>11} | {'High':>11} | {'Low':>11} | {'Close':>11}")
    print("-" * 83)
    for row in rows:
        opened = datetime.fromtimestamp(row[0] / 1000, tz=timezone.utc)
        print(
            f"{opened.isoformat():25} | {float(row[1]):>11.2f} | {float(row[2]):>11.2f} | "
            f"{float(row[3]):>11.2f} | {float(row[4]):>11.2f}"
        )
    print("=" * 83)


if __name__ == "__main__":
    main()
