"""API credentials and signature strategies.

USER_DATA and TRADE endpoints require an API key, and most of them also a
signature over the query string. The key travels in the ``X-MBX-APIKEY``
header; the signature strategy decides how the query string is signed.

Production and testnet credentials are not interchangeable.

Design Decisions:
    - Frozen pydantic models: credentials are immutable values, cheap to copy
      and safe to share between clients and requests
    - SecretStr everywhere: neither the key nor the secret material shows up
      in ``repr``/``str``/``model_dump_json`` output
    - Tagged union on ``kind``: exactly one strategy is active and it fully
      determines the signing algorithm
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class HmacSignature(BaseModel):
    """HMAC-SHA256 signing with a shared API secret."""

    kind: Literal["hmac"] = "hmac"
    api_secret: SecretStr = Field(..., repr=False)

    model_config = ConfigDict(frozen=True)


class RsaSignature(BaseModel):
    """RSA (PKCS#1 v1.5, SHA-256) signing with a PKCS#8 PEM private key.

    The key may be passphrase-encrypted, in which case ``password`` is required.
    """

    kind: Literal["rsa"] = "rsa"
    key: SecretStr = Field(..., repr=False)
    password: Optional[SecretStr] = Field(default=None, repr=False)

    model_config = ConfigDict(frozen=True)


class Ed25519Signature(BaseModel):
    """Ed25519 signing with a PKCS#8 PEM private key."""

    kind: Literal["ed25519"] = "ed25519"
    key: SecretStr = Field(..., repr=False)

    model_config = ConfigDict(frozen=True)


SignatureStrategy = Annotated[
    Union[HmacSignature, RsaSignature, Ed25519Signature],
    Field(discriminator="kind"),
]


class Credentials(BaseModel):
    """API key plus the strategy used to sign requests.

    Example:
        >>> creds = Credentials.from_hmac("my-key", "my-secret")
        >>> creds.signature.kind
        'hmac'
    """

    api_key: SecretStr
    signature: SignatureStrategy = Field(..., repr=False)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_hmac(cls, api_key: str, api_secret: str) -> Credentials:
        """Credentials signing with HMAC-SHA256."""
        return cls(api_key=api_key, signature=HmacSignature(api_secret=api_secret))

    @classmethod
    def from_rsa(cls, api_key: str, key: str, password: str | None = None) -> Credentials:
        """Credentials signing with an RSA PKCS#8 PEM key (optionally encrypted)."""
        return cls(api_key=api_key, signature=RsaSignature(key=key, password=password))

    @classmethod
    def from_ed25519(cls, api_key: str, key: str) -> Credentials:
        """Credentials signing with an Ed25519 PKCS#8 PEM key."""
        return cls(api_key=api_key, signature=Ed25519Signature(key=key))

    @property
    def kind(self) -> str:
        """Name of the active signature strategy."""
        return self.signature.kind
