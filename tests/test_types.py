"""
Unit tests for webhook models and exceptions
"""

from helius import (
    CreateWebhookRequest,
    EditWebhookRequest,
    HeliusError,
    OperationError,
    ServerError,
    TransportError,
    ValidationError,
    Webhook,
    WebhookType,
)


class TestModels:
    """Test wire models"""

    def test_webhook_accepts_wire_names(self):
        webhook = Webhook.from_response({
            "webhookID": "abc",
            "webhookURL": "https://example.com",
            "webhookType": "rawDevnet",
            "accountAddresses": ["a"],
            "txnStatus": "success",
        })
        assert webhook.webhook_id == "abc"
        assert webhook.webhook_type == WebhookType.RAW_DEVNET
        assert webhook.account_addresses == ["a"]
        assert webhook.transaction_types == []

    def test_webhook_keeps_unknown_fields(self):
        data = {"webhookID": "abc", "webhookURL": "https://example.com", "project": "p-1"}
        assert Webhook.from_response(data).to_dict() == data

    def test_create_request_omits_unset_optionals(self):
        request = CreateWebhookRequest(
            webhook_url="https://example.com",
            transaction_types=["ANY"],
            account_addresses=[],
        )
        assert request.to_dict() == {
            "webhookURL": "https://example.com",
            "transactionTypes": ["ANY"],
            "accountAddresses": [],
        }

    def test_edit_request_by_alias(self):
        request = EditWebhookRequest(webhookType="discord", authHeader="token")
        assert request.to_dict() == {"webhookType": "discord", "authHeader": "token"}


class TestExceptions:
    """Test the error taxonomy"""

    def test_message_format(self):
        error = TransportError("getWebhooks", "boom")
        assert str(error) == "error during getWebhooks: boom"
        assert error.operation == "getWebhooks"
        assert error.cause == "boom"

    def test_kinds(self):
        assert ServerError("op", "x", status=500).kind == "server"
        assert TransportError("op", "x").kind == "transport"
        assert ValidationError("op", "x").kind == "validation"

    def test_hierarchy(self):
        for cls in (ServerError, TransportError, ValidationError):
            assert issubclass(cls, OperationError)
            assert issubclass(cls, HeliusError)
