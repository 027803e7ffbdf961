"""Mock notification provider for SimpleNS. Validates everything, delivers nothing."""

from __future__ import annotations

from .provider import DEFAULT_RATE_LIMIT, MANIFEST, MockProvider
from .schemas import (
    CHANNEL,
    Content,
    MockNotification,
    Recipient,
    content_schema,
    notification_schema,
    recipient_schema,
)

__all__ = [
    "CHANNEL",
    "Content",
    "DEFAULT_RATE_LIMIT",
    "MANIFEST",
    "MockNotification",
    "MockProvider",
    "Recipient",
    "content_schema",
    "notification_schema",
    "recipient_schema",
]
