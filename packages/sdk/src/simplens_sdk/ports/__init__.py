"""Port definitions for provider plugins."""

from __future__ import annotations

from .provider import INotificationProvider

__all__ = ["INotificationProvider"]
