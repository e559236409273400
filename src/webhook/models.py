"""Data models for the survey webhook handler."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ChannelConfig:
    """LINE channel credentials, built once at startup and injected."""

    channel_secret: str
    channel_access_token: str
    # Return 400 before parsing when the signature is invalid
    strict_signature: bool = False

    @classmethod
    def from_env(cls) -> ChannelConfig:
        """Create ChannelConfig from environment variables."""
        strict = os.environ.get("LINE_STRICT_SIGNATURE", "").strip().lower()
        return cls(
            channel_secret=os.environ["LINE_CHANNEL_SECRET"],
            channel_access_token=os.environ["LINE_CHANNEL_TOKEN"],
            strict_signature=strict in _TRUTHY,
        )


@dataclass
class WebhookResult:
    """Outcome of handling one webhook callback."""

    status_code: int
    replies_sent: int = 0
