"""Provider lifecycle states."""

from __future__ import annotations

from enum import Enum


class ProviderState(Enum):
    """Where a provider instance is in its lifecycle.

    ``UNINITIALIZED -> READY -> SHUTDOWN``
    """

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    SHUTDOWN = "shutdown"
