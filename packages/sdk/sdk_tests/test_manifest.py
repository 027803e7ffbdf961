"""Tests for ProviderManifest."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from simplens_sdk.manifest import ProviderManifest


def _manifest(**overrides):
    data = {
        "name": "simplens-plugin-sample",
        "version": "2.1.0",
        "channel": "sample",
        "display_name": "Sample",
        "required_credentials": ("apiKey",),
    }
    data.update(overrides)
    return ProviderManifest(**data)


def test_to_dict_uses_registry_keys():
    manifest = _manifest(description="d", author="a", homepage="https://example.com")

    assert manifest.to_dict() == {
        "name": "simplens-plugin-sample",
        "version": "2.1.0",
        "channel": "sample",
        "displayName": "Sample",
        "description": "d",
        "author": "a",
        "homepage": "https://example.com",
        "requiredCredentials": ["apiKey"],
    }


@pytest.mark.parametrize("version", ["1.0.0", "0.3.12", "1.0.0-beta.1", "1.0.0+build.7"])
def test_accepts_semantic_versions(version):
    assert _manifest(version=version).version == version


@pytest.mark.parametrize("version", ["1.0", "v1.0.0", "01.0.0", "latest"])
def test_rejects_non_semantic_versions(version):
    with pytest.raises(PydanticValidationError):
        _manifest(version=version)


def test_manifest_is_immutable():
    manifest = _manifest()

    with pytest.raises(PydanticValidationError):
        manifest.name = "other"  # type: ignore[misc]
