"""SimpleNS provider SDK: the contract every notification provider plugin implements."""

from __future__ import annotations

from .config import ProviderConfig, RateLimitConfig, RefillInterval, resolve_rate_limit
from .delivery import DeliveryError, DeliveryResult
from .exceptions import NotificationValidationError, ProviderError, SimpleNSError
from .health import ProviderHealthCheck
from .lifecycle import ProviderState
from .manifest import ProviderManifest
from .notification import BaseNotification, coerce_timestamp
from .ports.provider import INotificationProvider
from .schema import Schema, SchemaFailure, SchemaResult, SchemaSuccess

__all__ = [
    "BaseNotification",
    "DeliveryError",
    "DeliveryResult",
    "INotificationProvider",
    "NotificationValidationError",
    "ProviderConfig",
    "ProviderError",
    "ProviderHealthCheck",
    "ProviderManifest",
    "ProviderState",
    "RateLimitConfig",
    "RefillInterval",
    "Schema",
    "SchemaFailure",
    "SchemaResult",
    "SchemaSuccess",
    "SimpleNSError",
    "coerce_timestamp",
    "resolve_rate_limit",
]
