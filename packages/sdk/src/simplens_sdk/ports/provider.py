"""Notification provider port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from typing_extensions import TypeVar

from ..notification import BaseNotification

if TYPE_CHECKING:
    from ..config import ProviderConfig, RateLimitConfig
    from ..delivery import DeliveryResult
    from ..manifest import ProviderManifest
    from ..schema import Schema

NotificationT = TypeVar("NotificationT", bound=BaseNotification, default=BaseNotification)


@runtime_checkable
class INotificationProvider(Protocol[NotificationT]):
    """
    Capability contract between the host plugin runtime and a delivery channel.

    The host depends only on this protocol. It reads ``manifest`` at
    registration, validates inbound payloads with the published schemas,
    throttles ``send`` with :meth:`get_rate_limit_config`, and drives
    ``initialize -> send* -> shutdown``.

    Providers must explicitly declare: class SmsProvider(INotificationProvider[SmsNotification]):
    """

    @property
    def manifest(self) -> ProviderManifest:
        """Static provider metadata."""
        ...

    def get_notification_schema(self) -> Schema[NotificationT]:
        """Schema for complete notifications on this channel."""
        ...

    def get_recipient_schema(self) -> Schema[Any]:
        """Schema for the ``recipient`` part of a notification."""
        ...

    def get_content_schema(self) -> Schema[Any]:
        """Schema for the ``content`` part of a notification."""
        ...

    def get_rate_limit_config(self) -> RateLimitConfig:
        """Token-bucket parameters for throttling ``send``."""
        ...

    async def initialize(self, config: ProviderConfig) -> None:
        """Receive configuration; called once before the first ``send``."""
        ...

    async def health_check(self) -> bool:
        """Report whether the provider can currently deliver."""
        ...

    async def send(self, notification: NotificationT) -> DeliveryResult:
        """Deliver one notification and report the outcome."""
        ...

    async def shutdown(self) -> None:
        """Release resources during host teardown."""
        ...
