#!/usr/bin/env python3
"""
Webhook management example

This example demonstrates:
1. Creating a webhook
2. Appending addresses to it
3. Editing it
4. Listing and deleting webhooks

Set HELIUS_API_KEY before running.
"""

import asyncio
import logging

from helius import CreateWebhookRequest, EditWebhookRequest, Helius, OperationError, WebhookType


async def main():
    async with Helius.from_env() as helius:
        # Step 1: Create a webhook
        print("Creating webhook...")
        webhook = await helius.create_webhook(CreateWebhookRequest(
            webhook_url="https://example.com/helius",
            transaction_types=["NFT_SALE"],
            account_addresses=["M2mx93ekt1fmXSVkTrUL9xVFHkmME8HTUi5Cyc5aF7K"],
            webhook_type=WebhookType.ENHANCED,
        ))
        print(f"Created webhook: {webhook.webhook_id}")

        # Step 2: Append addresses
        webhook = await helius.append_addresses_to_webhook(
            webhook.webhook_id,
            ["TSWAPaqyCSx2KABk68Shruf4rp7CxcNi8hAsbdwmHbN"],
        )
        print(f"Watching {len(webhook.account_addresses)} addresses")

        # Step 3: Edit
        webhook = await helius.edit_webhook(
            webhook.webhook_id,
            EditWebhookRequest(transaction_types=["NFT_SALE", "NFT_LISTING"]),
        )
        print(f"Transaction types: {webhook.transaction_types}")

        # Step 4: List and clean up
        for hook in await helius.get_all_webhooks():
            print(f"  {hook.webhook_id} -> {hook.webhook_url}")

        try:
            await helius.delete_webhook(webhook.webhook_id)
            print("Deleted webhook")
        except OperationError as e:
            print(f"Delete failed ({e.kind}): {e.cause}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
