"""
Type definitions for the Helius SDK.

Field names follow the Python convention; the wire format uses the service's
camelCase names, which are also accepted on input.

Enum-valued fields also accept plain strings, so values the service adds
later still parse.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

MAX_ACCOUNT_ADDRESSES = 10000
ADDRESS_LIMIT_MESSAGE = f"a single webhook cannot contain more than {MAX_ACCOUNT_ADDRESSES:,} addresses"


class WebhookType(str, Enum):
    """Delivery format of a webhook."""

    RAW = "raw"
    ENHANCED = "enhanced"
    DISCORD = "discord"
    RAW_DEVNET = "rawDevnet"
    ENHANCED_DEVNET = "enhancedDevnet"
    DISCORD_DEVNET = "discordDevnet"


class TxnStatus(str, Enum):
    ALL = "all"
    SUCCESS = "success"
    FAILED = "failed"


class AccountWebhookEncoding(str, Enum):
    JSON_PARSED = "jsonParsed"
    JSON = "json"
    BASE58 = "base58"
    BASE64 = "base64"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow", use_enum_values=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire dictionary, keeping only fields that were set."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class Webhook(_WireModel):
    """A webhook as stored by the service.

    Only the ID is required. Fields the SDK does not know about are kept as
    extras, so a fetched webhook can be written back without losing data.
    """

    webhook_id: str = Field(alias="webhookID")
    wallet: Optional[str] = None
    webhook_url: Optional[str] = Field(default=None, alias="webhookURL")
    webhook_type: Optional[Union[WebhookType, str]] = Field(default=None, alias="webhookType")
    transaction_types: Optional[List[str]] = Field(default_factory=list, alias="transactionTypes")
    account_addresses: Optional[List[str]] = Field(default_factory=list, alias="accountAddresses")
    auth_header: Optional[str] = Field(default=None, alias="authHeader")
    txn_status: Optional[Union[TxnStatus, str]] = Field(default=None, alias="txnStatus")
    encoding: Optional[Union[AccountWebhookEncoding, str]] = None
    account_address_owners: Optional[List[str]] = Field(default=None, alias="accountAddressOwners")

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "Webhook":
        """Create a Webhook from a decoded response body."""
        return cls.model_validate(data)


class CreateWebhookRequest(_WireModel):
    """Fields needed to create a webhook; the service assigns the ID."""

    webhook_url: str = Field(alias="webhookURL")
    transaction_types: List[str] = Field(alias="transactionTypes")
    account_addresses: List[str] = Field(alias="accountAddresses")
    webhook_type: Optional[Union[WebhookType, str]] = Field(default=None, alias="webhookType")
    auth_header: Optional[str] = Field(default=None, alias="authHeader")
    txn_status: Optional[Union[TxnStatus, str]] = Field(default=None, alias="txnStatus")
    encoding: Optional[Union[AccountWebhookEncoding, str]] = None
    account_address_owners: Optional[List[str]] = Field(default=None, alias="accountAddressOwners")


class EditWebhookRequest(_WireModel):
    """Fields to change on an existing webhook. Unset fields stay as they are."""

    webhook_url: Optional[str] = Field(default=None, alias="webhookURL")
    transaction_types: Optional[List[str]] = Field(default=None, alias="transactionTypes")
    account_addresses: Optional[List[str]] = Field(default=None, alias="accountAddresses")
    webhook_type: Optional[Union[WebhookType, str]] = Field(default=None, alias="webhookType")
    auth_header: Optional[str] = Field(default=None, alias="authHeader")
    txn_status: Optional[Union[TxnStatus, str]] = Field(default=None, alias="txnStatus")
    encoding: Optional[Union[AccountWebhookEncoding, str]] = None
    account_address_owners: Optional[List[str]] = Field(default=None, alias="accountAddressOwners")
