"""Delivery outcome types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeliveryError:
    """Why a delivery attempt failed."""

    code: str
    message: str
    retryable: bool = False


@dataclass(frozen=True)
class DeliveryResult:
    """Immutable outcome of a single ``send`` invocation."""

    success: bool
    message_id: str | None = None
    error: DeliveryError | None = None

    @classmethod
    def sent(cls, message_id: str | None = None) -> DeliveryResult:
        """Create a successful delivery result."""
        return cls(success=True, message_id=message_id)

    @classmethod
    def failed(
        cls,
        code: str,
        message: str,
        retryable: bool = False,
    ) -> DeliveryResult:
        """Create a failed delivery result."""
        return cls(
            success=False,
            error=DeliveryError(code=code, message=message, retryable=retryable),
        )
