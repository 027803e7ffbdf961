"""Mock provider. Accepts every notification and delivers none."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from simplens_sdk.config import RateLimitConfig, resolve_rate_limit
from simplens_sdk.delivery import DeliveryResult
from simplens_sdk.lifecycle import ProviderState
from simplens_sdk.manifest import ProviderManifest
from simplens_sdk.ports.provider import INotificationProvider

from .schemas import (
    CHANNEL,
    Content,
    MockNotification,
    Recipient,
    content_schema,
    notification_schema,
    recipient_schema,
)

if TYPE_CHECKING:
    from simplens_sdk.config import ProviderConfig
    from simplens_sdk.schema import Schema

_log = logging.getLogger(__name__)

DEFAULT_RATE_LIMIT = RateLimitConfig(max_tokens=100, refill_rate=10, refill_interval="second")

MANIFEST = ProviderManifest(
    name="simplens-plugin-mock",
    version="1.0.0",
    channel=CHANNEL,
    display_name="Mock",
    description="Send mock notifications for testing",
    author="Adhish Krishna S",
    homepage="https://github.com/SimpleNotificationSystem/plugin-mock",
    required_credentials=(),
)


class MockProvider(INotificationProvider[MockNotification]):
    """
    Reference provider for exercising a host's plugin runtime.

    Every operation succeeds without touching the network: ``send`` only
    logs the attempt. The lifecycle is permissive; ``send`` and
    ``get_rate_limit_config`` work before ``initialize`` and fall back to
    defaults.

    Pass *logger* to capture the provider's log records in tests.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or _log
        self._config: ProviderConfig | Mapping[str, Any] | None = None
        self._state = ProviderState.UNINITIALIZED

    @property
    def manifest(self) -> ProviderManifest:
        return MANIFEST

    @property
    def state(self) -> ProviderState:
        """Current lifecycle state. Informational; nothing is gated on it."""
        return self._state

    @property
    def config(self) -> ProviderConfig | Mapping[str, Any] | None:
        return self._config

    # Schemas

    def get_notification_schema(self) -> Schema[MockNotification]:
        return notification_schema

    def get_recipient_schema(self) -> Schema[Recipient]:
        return recipient_schema

    def get_content_schema(self) -> Schema[Content]:
        return content_schema

    # Rate limiting

    def get_rate_limit_config(self) -> RateLimitConfig:
        if isinstance(self._config, Mapping):
            options = self._config.get("options")
        else:
            options = getattr(self._config, "options", None)
        return resolve_rate_limit(options, DEFAULT_RATE_LIMIT)

    # Lifecycle

    async def initialize(self, config: ProviderConfig | Mapping[str, Any]) -> None:
        """Store *config* as given. Any envelope with ``options`` is accepted."""
        self._config = config
        self._state = ProviderState.READY
        self._log.debug("Mock provider initialized")

    async def health_check(self) -> bool:
        return True

    async def send(self, notification: MockNotification) -> DeliveryResult:
        try:
            self._log.info(
                "Sending mock notification %s to %s",
                notification.notification_id,
                notification.recipient.user_id,
            )
            self._log.debug("Mock notification content: %s", notification.content.message)
            return DeliveryResult.sent()
        except Exception as e:
            self._log.error("Failed to send notification: %s", e, exc_info=True)
            return DeliveryResult.failed("SEND_FAILED", str(e))

    async def shutdown(self) -> None:
        self._log.info("Mock provider shutting down")
        self._state = ProviderState.SHUTDOWN
