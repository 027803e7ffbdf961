"""Provider manifest: static metadata shown in the host's plugin registry."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_SEMVER_PATTERN = (
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"
)


class ProviderManifest(BaseModel):
    """Immutable descriptive record of a provider.

    Read by the host at registration time for registry display and
    capability negotiation (``channel`` routes notifications to the provider).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    version: str = Field(..., pattern=_SEMVER_PATTERN)
    channel: str = Field(..., min_length=1)
    display_name: str
    description: str = ""
    author: str = ""
    homepage: str = ""
    required_credentials: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase shape used by the host registry."""
        return {
            "name": self.name,
            "version": self.version,
            "channel": self.channel,
            "displayName": self.display_name,
            "description": self.description,
            "author": self.author,
            "homepage": self.homepage,
            "requiredCredentials": list(self.required_credentials),
        }
