"""Provider configuration and rate-limit resolution."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

RefillInterval = Literal["second", "minute", "hour", "day"]


def _empty_mapping() -> dict[str, Any]:
    return {}


@dataclass(frozen=True)
class ProviderConfig:
    """Configuration handed to a provider once, at initialization.

    Attributes:
        id: Identifier the host assigned to this provider instance.
        credentials: Credential name to secret value. May be empty.
        options: Free-form provider options (e.g. ``{"rateLimit": {...}}``).
    """

    id: str
    credentials: Mapping[str, str] = field(default_factory=_empty_mapping)
    options: Mapping[str, Any] = field(default_factory=_empty_mapping)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ProviderConfig:
        """Build a config from the host's raw mapping.

        Values are taken as-is; shape is not validated.
        """
        return cls(
            id=data.get("id") or "",
            credentials=data.get("credentials") or {},
            options=data.get("options") or {},
        )


@dataclass(frozen=True)
class RateLimitConfig:
    """Token-bucket parameters consumed by the host's rate limiter."""

    max_tokens: int
    refill_rate: float
    refill_interval: RefillInterval = "second"

    def to_dict(self) -> dict[str, Any]:
        """Return the wire shape the host rate limiter expects."""
        return {
            "maxTokens": self.max_tokens,
            "refillRate": self.refill_rate,
            "refillInterval": self.refill_interval,
        }


def _is_truthy(value: Any) -> bool:
    """JavaScript truthiness: only None, False, 0, NaN and "" are unset."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _coalesce(value: Any, default: Any) -> Any:
    return value if _is_truthy(value) else default


def resolve_rate_limit(
    options: Mapping[str, Any] | None,
    defaults: RateLimitConfig,
) -> RateLimitConfig:
    """Resolve a :class:`RateLimitConfig` from provider options.

    Reads ``options["rateLimit"]`` and resolves ``maxTokens``, ``refillRate``
    and ``refillInterval`` independently. A supplied value is used only when
    it is truthy in the JavaScript sense, so ``0`` and ``NaN`` fall back to
    the default just like a missing key.
    """
    if not isinstance(options, Mapping):
        options = {}
    rate_limit = options.get("rateLimit")
    if not isinstance(rate_limit, Mapping):
        rate_limit = {}

    return RateLimitConfig(
        max_tokens=_coalesce(rate_limit.get("maxTokens"), defaults.max_tokens),
        refill_rate=_coalesce(rate_limit.get("refillRate"), defaults.refill_rate),
        refill_interval=_coalesce(rate_limit.get("refillInterval"), defaults.refill_interval),
    )
