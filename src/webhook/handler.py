"""Survey webhook handler.

Pipeline for one callback:
1. Signature verification (HMAC-SHA256 over the raw body)
2. Event parsing
3. Dispatch: reply with the survey template to each trigger message
4. Respond 200, or 400 when the signature was invalid

An invalid signature does not stop parsing and dispatch unless the channel is
configured with ``strict_signature``; the request still answers 400.
"""

from __future__ import annotations

import logging

from src.webhook.events import parse_events
from src.webhook.line import LineMessagingClient
from src.webhook.models import ChannelConfig, WebhookResult
from src.webhook.signature import verify_signature
from src.webhook.survey import build_survey_template, is_survey_request

logger = logging.getLogger(__name__)


class SurveyWebhookHandler:
    """Handles LINE webhook callbacks for the survey bot."""

    def __init__(
        self,
        config: ChannelConfig,
        client: LineMessagingClient | None = None,
    ) -> None:
        self._config = config
        self._client = client or LineMessagingClient(config.channel_access_token)

    async def handle(self, body: bytes, signature: str | None) -> WebhookResult:
        """Verify, parse and dispatch one webhook body.

        EventParseError and reply transport errors propagate to the caller.
        """
        status_code = 200
        if not verify_signature(self._config.channel_secret, body, signature):
            logger.warning("Invalid LINE webhook signature")
            status_code = 400
            if self._config.strict_signature:
                return WebhookResult(status_code=status_code)

        events = parse_events(body)

        replies_sent = 0
        for event in events:
            if not is_survey_request(event) or event.reply_token is None:
                continue
            await self._client.reply(event.reply_token, [build_survey_template()])
            replies_sent += 1

        if replies_sent:
            logger.info("Sent %d survey replies", replies_sent)
        return WebhookResult(status_code=status_code, replies_sent=replies_sent)
