"""Payload models for the ``mock`` channel."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from simplens_sdk.notification import BaseNotification
from simplens_sdk.schema import Schema

CHANNEL = "mock"


class Recipient(BaseModel):
    """Delivery target of a mock notification."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1)


class Content(BaseModel):
    """Payload of a mock notification."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., min_length=1)


class MockNotification(BaseNotification):
    """A notification addressed to the mock channel."""

    channel: Literal["mock"]
    recipient: Recipient
    content: Content


recipient_schema: Schema[Recipient] = Schema(Recipient)
content_schema: Schema[Content] = Schema(Content)
notification_schema: Schema[MockNotification] = Schema(MockNotification)
