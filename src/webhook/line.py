"""LINE Messaging API client for sending replies.

Replies are fire-and-forget: no retry, and an error status from the API is
logged rather than raised. Transport failures (httpx.HTTPError) propagate to
the caller.
"""

from __future__ import annotations

import logging

import httpx

from src.models import ReplyRequest, TemplateMessage

logger = logging.getLogger(__name__)

_LINE_API_BASE = "https://api.line.me"
_REPLY_TIMEOUT_SECONDS = 30.0


class LineMessagingClient:
    """Sends reply messages through the LINE Messaging API."""

    def __init__(
        self,
        channel_access_token: str,
        api_base: str = _LINE_API_BASE,
    ) -> None:
        self._channel_access_token = channel_access_token
        self._api_base = api_base.rstrip("/")

    async def reply(
        self, reply_token: str, messages: list[TemplateMessage],
    ) -> None:
        """Send ``messages`` addressed by a single-use reply token.

        TLS certificate verification enabled.
        """
        url = f"{self._api_base}/v2/bot/message/reply"
        payload = ReplyRequest(reply_token=reply_token, messages=messages)
        headers = {"Authorization": f"Bearer {self._channel_access_token}"}

        async with httpx.AsyncClient(verify=True) as client:
            resp = await client.post(
                url,
                json=payload.model_dump(mode="json", by_alias=True),
                headers=headers,
                timeout=_REPLY_TIMEOUT_SECONDS,
            )

        if resp.status_code >= 400:
            logger.warning("LINE reply failed with status %s", resp.status_code)
