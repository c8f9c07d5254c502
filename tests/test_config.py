"""
Unit tests for client configuration
"""

import pytest

from helius import ClientConfig


class TestClientConfig:
    """Test ClientConfig"""

    def test_defaults(self):
        config = ClientConfig(api_key="key")
        assert config.base_url == "https://api.helius.xyz"
        assert config.api_version == "v0"
        assert config.timeout == 30
        assert config.webhooks_url == "https://api.helius.xyz/v0/webhooks"

    def test_normalizes_slashes(self):
        config = ClientConfig(api_key="key", base_url="http://localhost:8080/", api_version="/v1/")
        assert config.webhooks_url == "http://localhost:8080/v1/webhooks"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HELIUS_API_KEY", "env-key")
        monkeypatch.setenv("HELIUS_BASE_URL", "http://test:8080")
        monkeypatch.setenv("HELIUS_API_VERSION", "v1")
        monkeypatch.setenv("HELIUS_TIMEOUT", "5")

        config = ClientConfig.from_env()

        assert config.api_key == "env-key"
        assert config.webhooks_url == "http://test:8080/v1/webhooks"
        assert config.timeout == 5

    def test_explicit_key_wins(self, monkeypatch):
        monkeypatch.setenv("HELIUS_API_KEY", "env-key")
        assert ClientConfig.from_env(api_key="explicit").api_key == "explicit"

    def test_from_env_without_api_key(self, monkeypatch):
        monkeypatch.delenv("HELIUS_API_KEY", raising=False)
        with pytest.raises(ValueError, match="API key required"):
            ClientConfig.from_env()
