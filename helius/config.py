"""
Client configuration for the Helius SDK.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://api.helius.xyz"
DEFAULT_API_VERSION = "v0"
DEFAULT_TIMEOUT = 30


@dataclass
class ClientConfig:
    """
    Connection settings for a Helius client.

    Args:
        api_key: API key generated at dev.helius.xyz
        base_url: Base URL of the Helius API
        api_version: Versioned path segment of the webhook API
        timeout: Request timeout in seconds
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")
        self.api_version = self.api_version.strip("/")

    @property
    def webhooks_url(self) -> str:
        return f"{self.base_url}/{self.api_version}/webhooks"

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "ClientConfig":
        """
        Load configuration from environment variables

        Reads HELIUS_API_KEY, HELIUS_BASE_URL, HELIUS_API_VERSION and
        HELIUS_TIMEOUT. An explicit api_key takes precedence.

        Raises:
            ValueError: If no API key is available
        """
        api_key = api_key or os.getenv("HELIUS_API_KEY")
        if not api_key:
            raise ValueError("API key required. Set HELIUS_API_KEY or pass api_key")

        return cls(
            api_key=api_key,
            base_url=os.getenv("HELIUS_BASE_URL", DEFAULT_BASE_URL),
            api_version=os.getenv("HELIUS_API_VERSION", DEFAULT_API_VERSION),
            timeout=int(os.getenv("HELIUS_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )
