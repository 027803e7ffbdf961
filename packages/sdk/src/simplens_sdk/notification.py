"""Base notification model shared by every provider channel."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

_datetime_adapter: TypeAdapter[datetime] = TypeAdapter(datetime)


def coerce_timestamp(value: Any) -> Any:
    """Normalize a timestamp-like value into an aware UTC ``datetime``.

    Accepts ISO-8601 strings, epoch milliseconds and ``datetime`` instances.
    Naive datetimes are taken as UTC. Anything else is returned unchanged for
    the field's type check to reject.
    """
    if isinstance(value, bool):
        raise ValueError("timestamp must not be a boolean")

    if isinstance(value, (int, float)):
        try:
            value = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(f"timestamp out of range: {value!r}") from exc
    elif isinstance(value, str):
        try:
            value = _datetime_adapter.validate_python(value.strip())
        except PydanticValidationError as exc:
            raise ValueError(f"invalid ISO-8601 timestamp: {value!r}") from exc

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


class BaseNotification(BaseModel):
    """
    Fields every dispatched notification carries, whatever its channel.

    Providers subclass this, narrowing ``channel`` to their literal tag and
    adding typed ``recipient`` and ``content`` models. Scalar fields are
    strict: ``"3"`` is not a ``retry_count`` and ``123`` is not an id.
    """

    model_config = ConfigDict(frozen=True)

    notification_id: str = Field(..., strict=True)
    request_id: UUID
    client_id: UUID
    channel: str = Field(..., strict=True)
    webhook_url: str = Field(..., strict=True)
    retry_count: int = Field(default=0, ge=0, strict=True)
    created_at: datetime

    @field_validator("created_at", mode="before")
    @classmethod
    def _normalize_created_at(cls, value: Any) -> Any:
        return coerce_timestamp(value)
