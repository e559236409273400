"""Parse LINE webhook bodies into typed events."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from src.models import Event, MessageEvent, TextMessage, UnknownEvent, UnknownMessage


class EventParseError(ValueError):
    """Raised when a webhook body cannot be parsed into events."""


def parse_events(body: bytes) -> list[Event]:
    """Parse a webhook body into events, preserving input order.

    Accepts the platform envelope ``{"destination": ..., "events": [...]}``
    as well as a bare JSON array of events.
    """
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EventParseError(f"Malformed webhook body: {exc}") from exc

    if isinstance(payload, dict):
        raw_events = payload.get("events", [])
    else:
        raw_events = payload

    if not isinstance(raw_events, list):
        raise EventParseError("Webhook events must be a JSON array")

    return [_parse_event(raw) for raw in raw_events]


def _parse_event(raw: Any) -> Event:
    if not isinstance(raw, dict):
        raise EventParseError(f"Webhook event must be an object, got {type(raw).__name__}")

    try:
        if raw.get("type") != "message":
            return UnknownEvent.model_validate(raw)
        message = raw.get("message") or {}
        content: TextMessage | UnknownMessage
        if message.get("type") == "text":
            content = TextMessage.model_validate(message)
        else:
            content = UnknownMessage.model_validate(message)
        return MessageEvent.model_validate({**raw, "message": content})
    except (ValidationError, AttributeError) as exc:
        raise EventParseError(f"Invalid webhook event: {exc}") from exc
