"""Unit tests for credential loading from the environment."""

import pytest

from laakhay.spot.config import load_credentials
from laakhay.spot.core.credentials import Ed25519Signature, HmacSignature, RsaSignature


class TestLoadCredentials:
    """Test load_credentials."""

    def test_no_api_key(self):
        """Test missing API key yields no credentials."""
        assert load_credentials({}) is None

    def test_hmac_default(self):
        """Test HMAC is the default key type."""
        creds = load_credentials({"BINANCE_API_KEY": "k", "BINANCE_API_SECRET": "s"})
        assert isinstance(creds.signature, HmacSignature)
        assert creds.api_key.get_secret_value() == "k"

    def test_hmac_missing_secret(self):
        with pytest.raises(ValueError, match="BINANCE_API_SECRET"):
            load_credentials({"BINANCE_API_KEY": "k"})

    def test_unknown_key_type(self):
        with pytest.raises(ValueError, match="BINANCE_KEY_TYPE"):
            load_credentials({"BINANCE_API_KEY": "k", "BINANCE_KEY_TYPE": "dsa"})

    def test_pem_key_from_file(self, tmp_path):
        """Test RSA and Ed25519 keys are read from a PEM file."""
        pem = tmp_path / "key.pem"
        pem.write_text("PEM-CONTENT")

        rsa_creds = load_credentials(
            {
                "BINANCE_API_KEY": "k",
                "BINANCE_KEY_TYPE": "RSA",
                "BINANCE_PRIVATE_KEY_PATH": str(pem),
                "BINANCE_PRIVATE_KEY_PASSWORD": "pw",
            }
        )
        assert isinstance(rsa_creds.signature, RsaSignature)
        assert rsa_creds.signature.key.get_secret_value() == "PEM-CONTENT"
        assert rsa_creds.signature.password.get_secret_value() == "pw"

        ed_creds = load_credentials(
            {
                "BINANCE_API_KEY": "k",
                "BINANCE_KEY_TYPE": "ed25519",
                "BINANCE_PRIVATE_KEY_PATH": str(pem),
            }
        )
        assert isinstance(ed_creds.signature, Ed25519Signature)

    def test_pem_path_required(self):
        with pytest.raises(ValueError, match="BINANCE_PRIVATE_KEY_PATH"):
            load_credentials({"BINANCE_API_KEY": "k", "BINANCE_KEY_TYPE": "ed25519"})

    def test_custom_prefix(self, monkeypatch):
        """Test a prefix selects e.g. testnet variables from os.environ."""
        monkeypatch.setenv("TESTNET_API_KEY", "tk")
        monkeypatch.setenv("TESTNET_API_SECRET", "ts")
        creds = load_credentials(prefix="TESTNET")
        assert creds.api_key.get_secret_value() == "tk"
