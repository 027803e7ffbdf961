from pytest_archon import archrule


def test_sdk_independence() -> None:
    """
    The SDK is the contract every provider builds on.
    It must never import a concrete provider plugin.
    """
    (
        archrule("sdk_is_independent")
        .match("simplens_sdk*")
        .should_not_import("simplens_mock*")
        .check("simplens_sdk")
    )


def test_ports_layering() -> None:
    """
    Ports (interfaces) should not depend on health adapters.
    """
    (
        archrule("ports_layering")
        .match("simplens_sdk.ports*")
        .should_not_import("simplens_sdk.health*")
        .check("simplens_sdk")
    )


def test_value_types_isolation() -> None:
    """
    Config, delivery and lifecycle types are the lowest level.
    They must not import ports, schemas or health adapters.
    """
    (
        archrule("value_types_isolation")
        .match("simplens_sdk.config*")
        .match("simplens_sdk.delivery*")
        .match("simplens_sdk.lifecycle*")
        .should_not_import("simplens_sdk.ports*")
        .should_not_import("simplens_sdk.schema*")
        .should_not_import("simplens_sdk.health*")
        .check("simplens_sdk")
    )


def test_plugin_does_not_import_health_adapters() -> None:
    """
    Health adapters wrap a provider from the host side.
    A plugin must not import them.
    """
    (
        archrule("plugin_layering")
        .match("simplens_mock*")
        .should_not_import("simplens_sdk.health*")
        .check("simplens_mock")
    )
