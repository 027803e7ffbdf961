"""Test configuration for simplens-mock."""

import pytest

from simplens_mock.provider import MockProvider
from simplens_sdk.config import ProviderConfig


@pytest.fixture
def provider():
    """Fresh, uninitialized mock provider."""
    return MockProvider()


@pytest.fixture
def make_notification():
    """Factory for valid raw mock notification payloads."""

    def _make(**overrides):
        data = {
            "notification_id": "test-123",
            "request_id": "550e8400-e29b-41d4-a716-446655440000",
            "client_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
            "channel": "mock",
            "webhook_url": "https://example.com/webhook",
            "retry_count": 0,
            "recipient": {"user_id": "user-456"},
            "content": {"message": "Hello, World!"},
            "created_at": "2025-12-21T09:00:00Z",
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def make_config():
    """Factory for provider configs as the host would build them."""

    def _make(**overrides):
        data = {"id": "mock-provider", "credentials": {}, "options": {}}
        data.update(overrides)
        return ProviderConfig(**data)

    return _make
