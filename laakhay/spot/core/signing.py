"""Request signing.

``sign`` is a pure function of the payload and the signature strategy. It
never logs either of them.

Encodings:
    - HMAC: lowercase hex digest
    - RSA / Ed25519: standard base64
"""

from __future__ import annotations

import base64
import hashlib
import hmac

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, padding, rsa

from .credentials import Ed25519Signature, HmacSignature, RsaSignature, SignatureStrategy
from .exceptions import InvalidApiSecretError

__all__ = ["sign"]


def sign(payload: str, signature: SignatureStrategy) -> str:
    """Sign ``payload`` with the given strategy.

    Args:
        payload: Exact query string to sign
        signature: Active signature strategy holding the key material

    Returns:
        Signature encoded for the wire (hex for HMAC, base64 otherwise)

    Raises:
        InvalidApiSecretError: If the key material cannot be used
    """
    if isinstance(signature, HmacSignature):
        return _sign_hmac(payload, signature.api_secret.get_secret_value())
    if isinstance(signature, RsaSignature):
        password = signature.password.get_secret_value() if signature.password else None
        return _sign_rsa(payload, signature.key.get_secret_value(), password)
    if isinstance(signature, Ed25519Signature):
        return _sign_ed25519(payload, signature.key.get_secret_value())
    raise InvalidApiSecretError(f"Unsupported signature strategy: {type(signature).__name__}")


def _sign_hmac(payload: str, secret: str) -> str:
    if not secret:
        raise InvalidApiSecretError("HMAC secret must not be empty")
    mac = hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256)
    return mac.hexdigest()


def _sign_rsa(payload: str, pem_key: str, password: str | None) -> str:
    private_key = _load_private_key(pem_key, password)
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise InvalidApiSecretError("Key is not an RSA private key")
    signature = private_key.sign(payload.encode("utf-8"), padding.PKCS1v15(), hashes.SHA256())
    return base64.b64encode(signature).decode("ascii")


def _sign_ed25519(payload: str, pem_key: str) -> str:
    private_key = _load_private_key(pem_key, None)
    if not isinstance(private_key, ed25519.Ed25519PrivateKey):
        raise InvalidApiSecretError("Key is not an Ed25519 private key")
    signature = private_key.sign(payload.encode("utf-8"))
    return base64.b64encode(signature).decode("ascii")


def _load_private_key(pem_key: str, password: str | None):
    try:
        return serialization.load_pem_private_key(
            pem_key.encode("utf-8"),
            password=password.encode("utf-8") if password is not None else None,
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidApiSecretError("Unable to load PEM private key") from exc
