"""Shared test fixtures for the LINE survey webhook."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.webhook.line import LineMessagingClient
from src.webhook.models import ChannelConfig
from src.webhook.signature import compute_signature

CHANNEL_SECRET = "test-channel-secret"
CHANNEL_TOKEN = "test-channel-token"


@pytest.fixture
def channel_config() -> ChannelConfig:
    return ChannelConfig(
        channel_secret=CHANNEL_SECRET,
        channel_access_token=CHANNEL_TOKEN,
    )


@pytest.fixture
def mock_line_client() -> MagicMock:
    client = MagicMock(spec=LineMessagingClient)
    client.reply = AsyncMock(return_value=None)
    return client


# --- Factory functions for test data ---


def make_text_event(
    text: str = "アンケート",
    reply_token: str = "abc123",
    **kwargs: Any,
) -> dict[str, Any]:
    """Factory for a text message event with sensible defaults."""
    event: dict[str, Any] = {
        "type": "message",
        "mode": "active",
        "timestamp": 1700000000000,
        "source": {"type": "user", "userId": "U0123456789"},
        "replyToken": reply_token,
        "message": {"id": "468789577898262530", "type": "text", "text": text},
    }
    event.update(kwargs)
    return event


def make_standby_event(text: str = "アンケート") -> dict[str, Any]:
    """Text event delivered while the channel is in standby mode (no reply token)."""
    event = make_text_event(text=text, mode="standby")
    del event["replyToken"]
    return event


def make_sticker_event(reply_token: str = "sticker-token") -> dict[str, Any]:
    return {
        "type": "message",
        "replyToken": reply_token,
        "source": {"type": "user", "userId": "U0123456789"},
        "message": {
            "id": "325708",
            "type": "sticker",
            "packageId": "1",
            "stickerId": "1",
        },
    }


def make_follow_event(reply_token: str = "follow-token") -> dict[str, Any]:
    return {
        "type": "follow",
        "replyToken": reply_token,
        "source": {"type": "user", "userId": "U0123456789"},
    }


def make_postback_event(data: str = "アンケート") -> dict[str, Any]:
    return {
        "type": "postback",
        "replyToken": "postback-token",
        "source": {"type": "user", "userId": "U0123456789"},
        "postback": {"data": data},
    }


def make_body(*events: dict[str, Any]) -> bytes:
    """Serialize events into a webhook envelope body."""
    payload = {"destination": "Uxxxxxxxxxxxxxx", "events": list(events)}
    return json.dumps(payload, ensure_ascii=False).encode()


def sign(body: bytes, secret: str = CHANNEL_SECRET) -> str:
    return compute_signature(secret, body)
