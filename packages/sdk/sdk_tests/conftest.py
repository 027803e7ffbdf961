"""Test configuration for simplens-sdk."""

import pytest


@pytest.fixture
def payload():
    """Valid raw payload for a notification on the ``sample`` channel."""
    return {
        "notification_id": "n-1",
        "request_id": "550e8400-e29b-41d4-a716-446655440000",
        "client_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
        "channel": "sample",
        "webhook_url": "https://example.com/webhook",
        "retry_count": 0,
        "recipient": {"address": "someone"},
        "created_at": "2025-12-21T09:00:00Z",
    }
