"""Endpoint URLs and credential loading.

Production and testnet have separate hosts and separate API keys.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .core.credentials import Credentials

# REST base URLs
BASE_URL = "https://api.binance.com"
TESTNET_BASE_URL = "https://testnet.binance.vision"

# WebSocket endpoints. ``/stream`` wraps every payload as
# ``{"stream": ..., "data": ...}``; ``/ws`` sends raw payloads.
WS_BASE_URL = "wss://stream.binance.com:9443/stream"
WS_RAW_URL = "wss://stream.binance.com:9443/ws"
TESTNET_WS_BASE_URL = "wss://testnet.binance.vision/stream"

KEY_TYPES = ("hmac", "rsa", "ed25519")


def load_credentials(
    environ: Mapping[str, str] | None = None,
    *,
    prefix: str = "BINANCE",
) -> Credentials | None:
    """Build credentials from environment variables.

    Variables (with the default prefix):
        BINANCE_API_KEY: API key; when unset, ``None`` is returned
        BINANCE_KEY_TYPE: ``hmac`` (default), ``rsa`` or ``ed25519``
        BINANCE_API_SECRET: HMAC secret
        BINANCE_PRIVATE_KEY_PATH: PEM file for ``rsa``/``ed25519``
        BINANCE_PRIVATE_KEY_PASSWORD: Optional passphrase for an RSA key

    Raises:
        ValueError: If the key type is unknown or its secret material is missing
    """
    env = os.environ if environ is None else environ
    api_key = env.get(f"{prefix}_API_KEY")
    if not api_key:
        return None

    key_type = env.get(f"{prefix}_KEY_TYPE", "hmac").lower()
    if key_type not in KEY_TYPES:
        raise ValueError(f"{prefix}_KEY_TYPE must be one of {KEY_TYPES}, got {key_type!r}")

    if key_type == "hmac":
        secret = env.get(f"{prefix}_API_SECRET")
        if not secret:
            raise ValueError(f"{prefix}_API_SECRET is required for hmac credentials")
        return Credentials.from_hmac(api_key, secret)

    key_path = env.get(f"{prefix}_PRIVATE_KEY_PATH")
    if not key_path:
        raise ValueError(f"{prefix}_PRIVATE_KEY_PATH is required for {key_type} credentials")
    pem = Path(key_path).read_text(encoding="utf-8")
    if key_type == "rsa":
        return Credentials.from_rsa(api_key, pem, env.get(f"{prefix}_PRIVATE_KEY_PASSWORD"))
    return Credentials.from_ed25519(api_key, pem)
