"""LINE webhook signature verification.

The platform signs every callback with HMAC-SHA256 over the raw request body,
keyed by the channel secret, and sends the base64 digest in X-Line-Signature.
"""

from __future__ import annotations

import base64
import hashlib
import hmac

SIGNATURE_HEADER = "x-line-signature"


def compute_signature(channel_secret: str, body: bytes) -> str:
    digest = hmac.new(channel_secret.encode(), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


def verify_signature(channel_secret: str, body: bytes, signature: str | None) -> bool:
    """Return True if ``signature`` matches the body's HMAC-SHA256 digest.

    Missing or malformed signatures are rejected. Comparison is constant-time
    via hmac.compare_digest.
    """
    if not signature:
        return False

    expected = compute_signature(channel_secret, body)
    return hmac.compare_digest(signature.encode(), expected.encode())
