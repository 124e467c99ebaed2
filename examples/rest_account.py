#!/usr/bin/env python3
"""Print non-zero balances of a Spot account.

Credentials come from BINANCE_* environment variables (see
``laakhay.spot.load_credentials``). Use ``--testnet`` with TESTNET_* keys.
"""

from __future__ import annotations

import argparse
import json
import logging

from laakhay.spot import BASE_URL, TESTNET_BASE_URL, SpotHTTPClient, load_credentials
from laakhay.spot.core import StructuredClientError
from laakhay.spot.endpoints import trade


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show Binance Spot account balances")
    p.add_argument("--testnet", action="store_true")
    p.add_argument("--recv-window", type=int, default=5000)
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    credentials = load_credentials(prefix="TESTNET" if args.testnet else "BINANCE")
    if credentials is None:
        raise SystemExit("No API key configured")

    client = SpotHTTPClient(TESTNET_BASE_URL if args.testnet else BASE_URL, credentials=credentials)
    with client:
        client = client.with_timestamp_delta(client.fetch_timestamp_delta())
        try:
            body = client.send(trade.account(recv_window=args.recv_window)).into_body_str()
        except StructuredClientError as e:
            raise SystemExit(f"Rejected: {e}") from e

    account = json.loads(body)
    for balance in account["balances"]:
        if float(balance["free"]) or float(balance["locked"]):
            print(f"{balance['asset']:>8}  free={balance['free']}  locked={balance['locked']}")


if __name__ == "__main__":
    main()
