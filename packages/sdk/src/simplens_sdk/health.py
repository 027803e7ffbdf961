"""Health check adapter for provider plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .ports.provider import INotificationProvider


class ProviderHealthCheck:
    """Health check for a notification provider.

    Shaped for health registries that poll ``async () -> bool`` callables.
    """

    def __init__(self, provider: INotificationProvider[Any]) -> None:
        self._provider = provider

    async def __call__(self) -> bool:
        try:
            return bool(await self._provider.health_check())
        except Exception:  # noqa: BLE001
            return False
