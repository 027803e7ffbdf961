"""Exception hierarchy for the SimpleNS provider SDK."""

from __future__ import annotations


class SimpleNSError(Exception):
    """Root exception for the SimpleNS provider SDK."""


class ProviderError(SimpleNSError):
    """Base class for provider-side failures."""


class NotificationValidationError(SimpleNSError):
    """Raised by :meth:`Schema.parse` when a payload does not match the schema.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))
