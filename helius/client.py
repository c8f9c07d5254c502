"""
Helius Client Implementation

Async webhook management for the Helius API.

Edits and address appends are read-modify-write round trips with no
concurrency token: two concurrent writers against the same webhook can
overwrite each other's changes. Callers that need stronger guarantees must
serialize their own updates.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import aiohttp
import pydantic

from .config import ClientConfig, DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .exceptions import OperationError, ServerError, TransportError, ValidationError
from .types import (
    ADDRESS_LIMIT_MESSAGE,
    MAX_ACCOUNT_ADDRESSES,
    CreateWebhookRequest,
    EditWebhookRequest,
    Webhook,
)

logger = logging.getLogger(__name__)


class Helius:
    """
    Helius client for managing webhooks.

    Args:
        api_key: API key generated at dev.helius.xyz
        base_url: Base URL of the Helius API (default: https://api.helius.xyz)
        api_version: Versioned path of the webhook API (default: v0)
        timeout: Request timeout in seconds (default: 30)
        session: Optional aiohttp session to send requests through. A session
            passed in here is never closed by the client.

    Usage:
        async with Helius("my-api-key") as helius:
            webhooks = await helius.get_all_webhooks()
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            api_version=api_version,
            timeout=timeout,
        )
        self._session = session
        self._owns_session = session is None

    @classmethod
    def from_env(cls, session: Optional[aiohttp.ClientSession] = None) -> "Helius":
        """Create a client from HELIUS_* environment variables."""
        config = ClientConfig.from_env()
        return cls(
            config.api_key,
            base_url=config.base_url,
            api_version=config.api_version,
            timeout=config.timeout,
            session=session,
        )

    @property
    def api_key(self) -> str:
        return self.config.api_key

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def connect(self):
        """Create the HTTP session if none exists yet."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            )
            self._owns_session = True

    async def close(self):
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    async def get_all_webhooks(self) -> List[Webhook]:
        """
        Retrieve all webhooks associated with the API key

        Returns:
            List of webhooks

        Raises:
            OperationError: If the request fails or the service returns an error
        """
        operation = "getWebhooks"
        try:
            data = await self._request(operation, "GET")
            if not isinstance(data, list):
                raise TransportError(operation, f"malformed response: expected a list, got {type(data).__name__}")
            return [self._parse_webhook(operation, item) for item in data]
        except OperationError as e:
            logger.error(str(e))
            raise

    async def get_webhook_by_id(self, webhook_id: str) -> Webhook:
        """
        Retrieve a single webhook by ID

        Args:
            webhook_id: ID of the webhook

        Returns:
            The webhook

        Raises:
            OperationError: If the request fails or the service returns an error
        """
        operation = "getWebhookByID"
        try:
            data = await self._fetch_webhook(operation, webhook_id)
            return self._parse_webhook(operation, data)
        except OperationError as e:
            logger.error(str(e))
            raise

    async def create_webhook(
        self, request: Union[CreateWebhookRequest, Mapping[str, Any]]
    ) -> Webhook:
        """
        Create a webhook

        Only the fields set on the request are sent; nothing is filled in.

        Args:
            request: Webhook fields to create the webhook with

        Returns:
            The created webhook, including its service-assigned ID
        """
        operation = "createWebhook"
        payload = _to_payload(request)
        logger.info(f"Creating webhook: {payload.get('webhookURL')}")
        try:
            data = await self._request(operation, "POST", json_data=payload)
            webhook = self._parse_webhook(operation, data)
        except OperationError as e:
            logger.error(str(e))
            raise
        logger.info(f"Webhook created: {webhook.webhook_id}")
        return webhook

    async def delete_webhook(self, webhook_id: str) -> bool:
        """
        Delete a webhook

        Args:
            webhook_id: ID of the webhook

        Returns:
            True once the webhook is deleted. Failures raise instead of
            returning False.
        """
        operation = "deleteWebhook"
        logger.info(f"Deleting webhook: {webhook_id}")
        try:
            await self._request(operation, "DELETE", f"/{webhook_id}", expect_body=False)
        except OperationError as e:
            logger.error(str(e))
            raise
        logger.info(f"Webhook deleted: {webhook_id}")
        return True

    async def edit_webhook(
        self,
        webhook_id: str,
        request: Union[EditWebhookRequest, Mapping[str, Any]],
    ) -> Webhook:
        """
        Edit a webhook

        Fetches the current webhook, overwrites the fields set on the request
        and writes the complete result back.

        Args:
            webhook_id: ID of the webhook
            request: Fields to change

        Returns:
            The updated webhook as returned by the service
        """
        operation = "editWebhook"
        changes = _to_payload(request)
        logger.info(f"Editing webhook {webhook_id}: {sorted(changes)}")
        try:
            current = await self._fetch_webhook(operation, webhook_id)
            data = await self._request(
                operation, "PUT", f"/{webhook_id}", json_data={**current, **changes}
            )
            webhook = self._parse_webhook(operation, data)
        except OperationError as e:
            logger.error(str(e))
            raise
        logger.info(f"Webhook updated: {webhook_id}")
        return webhook

    async def append_addresses_to_webhook(
        self, webhook_id: str, new_addresses: Sequence[str]
    ) -> Webhook:
        """
        Append account addresses to a webhook

        Addresses are added after the existing ones in order. Duplicates are
        kept.

        Args:
            webhook_id: ID of the webhook
            new_addresses: Addresses to add

        Returns:
            The updated webhook as returned by the service

        Raises:
            ValidationError: If the webhook would hold more than 10,000
                addresses. Nothing is written in that case.
            OperationError: If the request fails or the service returns an error
            TypeError: If new_addresses is a single string
        """
        operation = "appendAddressesToWebhook"
        if isinstance(new_addresses, str):
            raise TypeError("new_addresses must be a sequence of addresses, not a str")
        logger.info(f"Appending {len(new_addresses)} addresses to webhook: {webhook_id}")
        try:
            current = await self._fetch_webhook(operation, webhook_id)
            addresses = list(current.get("accountAddresses") or []) + list(new_addresses)
            if len(addresses) > MAX_ACCOUNT_ADDRESSES:
                raise ValidationError(operation, ADDRESS_LIMIT_MESSAGE)

            data = await self._request(
                operation,
                "PUT",
                f"/{webhook_id}",
                json_data={**current, "accountAddresses": addresses},
            )
            webhook = self._parse_webhook(operation, data)
        except OperationError as e:
            logger.error(str(e))
            raise
        logger.info(f"Webhook {webhook_id} now watches {len(addresses)} addresses")
        return webhook

    async def _fetch_webhook(self, operation: str, webhook_id: str) -> Dict[str, Any]:
        """GET a webhook and return the raw JSON object."""
        data = await self._request(operation, "GET", f"/{webhook_id}")
        if not isinstance(data, dict):
            raise TransportError(operation, f"malformed response: expected an object, got {type(data).__name__}")
        return data

    async def _request(
        self,
        operation: str,
        method: str,
        path: str = "",
        json_data: Optional[Dict[str, Any]] = None,
        expect_body: bool = True,
    ) -> Any:
        """
        Make a single request against the webhook endpoint.

        Errors are raised tagged with ``operation``.
        """
        if self._session is None:
            await self.connect()

        url = f"{self.config.webhooks_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            async with self._session.request(
                method,
                url,
                params={"api-key": self.config.api_key},
                json=json_data,
            ) as response:
                if not 200 <= response.status < 300:
                    cause = await _error_message(response)
                    raise ServerError(operation, cause, status=response.status)
                if not expect_body:
                    return None
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise TransportError(operation, f"malformed response: {e}") from e
        except OperationError:
            raise
        except aiohttp.ClientError as e:
            raise TransportError(operation, str(e) or type(e).__name__) from e
        except asyncio.TimeoutError as e:
            raise TransportError(operation, "request timed out") from e
        except Exception as e:
            raise TransportError(operation, str(e) or type(e).__name__) from e

    @staticmethod
    def _parse_webhook(operation: str, data: Any) -> Webhook:
        try:
            return Webhook.from_response(data)
        except pydantic.ValidationError as e:
            raise TransportError(operation, f"malformed response: {e}") from e


def _to_payload(request: Union[CreateWebhookRequest, EditWebhookRequest, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(request, (CreateWebhookRequest, EditWebhookRequest, Webhook)):
        return request.to_dict()
    return dict(request)


async def _error_message(response: aiohttp.ClientResponse) -> str:
    """Extract the ``error`` field of an error body, falling back to its text."""
    text = await response.text(errors="replace")
    try:
        payload = json.loads(text)
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return text or f"HTTP {response.status}"
