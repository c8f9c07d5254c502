"""
Shared fixtures for the Helius SDK test suite.

Requests go through a mocked aiohttp session that replays scripted
responses and records every call.
"""

import json
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from helius import Helius

TEST_API_KEY = "test-key"
TEST_BASE_URL = "https://api.helius.test"


def make_response(status: int = 200, body: Any = None, text: Optional[str] = None):
    """Build an async context manager yielding a mocked aiohttp response."""
    if text is None:
        text = json.dumps(body) if body is not None else ""

    def _json(content_type="application/json"):
        if not text.strip():
            return None
        return json.loads(text)

    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=text)
    response.json = AsyncMock(side_effect=_json)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


def webhook_data(webhook_id: str = "abc", addresses: Optional[List[str]] = None, **overrides) -> Dict[str, Any]:
    data = {
        "webhookID": webhook_id,
        "wallet": "wallet-1",
        "webhookURL": "https://example.com/hook",
        "webhookType": "enhanced",
        "transactionTypes": ["NFT_SALE"],
        "accountAddresses": ["addr-a", "addr-b"] if addresses is None else addresses,
        "authHeader": "Bearer secret",
    }
    data.update(overrides)
    return data


@pytest.fixture
def session():
    """Mocked aiohttp session; script it through ``session.request.side_effect``."""
    mock_session = MagicMock()
    mock_session.request = MagicMock()
    mock_session.close = AsyncMock()
    return mock_session


@pytest.fixture
def helius(session):
    return Helius(TEST_API_KEY, base_url=TEST_BASE_URL, session=session)


def sent_calls(session) -> List[Dict[str, Any]]:
    """Return (method, url, params, json) of every request made on the session."""
    calls = []
    for call in session.request.call_args_list:
        method, url = call.args
        calls.append({
            "method": method,
            "url": url,
            "params": call.kwargs.get("params"),
            "json": call.kwargs.get("json"),
        })
    return calls
