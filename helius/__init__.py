"""
Helius Python SDK

Async client for managing webhooks on the Helius API.

Example:
    ```python
    from helius import Helius, EditWebhookRequest

    async with Helius("my-api-key") as helius:
        webhooks = await helius.get_all_webhooks()
        await helius.edit_webhook(
            webhooks[0].webhook_id,
            EditWebhookRequest(webhook_url="https://example.com/hook"),
        )
    ```
"""

__version__ = "0.1.0"

from .client import Helius
from .config import ClientConfig
from .types import (
    ADDRESS_LIMIT_MESSAGE,
    MAX_ACCOUNT_ADDRESSES,
    AccountWebhookEncoding,
    CreateWebhookRequest,
    EditWebhookRequest,
    TxnStatus,
    Webhook,
    WebhookType,
)
from .exceptions import (
    HeliusError,
    OperationError,
    ServerError,
    TransportError,
    ValidationError,
)
from . import types as Types

__all__ = [
    "Helius",
    "ClientConfig",
    "Webhook",
    "WebhookType",
    "TxnStatus",
    "AccountWebhookEncoding",
    "CreateWebhookRequest",
    "EditWebhookRequest",
    "MAX_ACCOUNT_ADDRESSES",
    "ADDRESS_LIMIT_MESSAGE",
    "Types",
    "HeliusError",
    "OperationError",
    "ServerError",
    "TransportError",
    "ValidationError",
]
