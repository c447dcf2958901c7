# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for messaging_kafka tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from messaging_kafka.configuration import ConfigurationTree
from messaging_kafka.topics import registry_topic_declaration as registry
from messaging_kafka.topics import util_partition_key

# =============================================================================
# Duck Typing Conformance Helpers
# =============================================================================


def assert_has_methods(
    obj: object,
    required_methods: list[str],
    *,
    protocol_name: str | None = None,
) -> None:
    """Assert that an object has all required methods (duck typing conformance).

    Args:
        obj: The object to check for method presence.
        required_methods: List of method names that must be present and callable.
        protocol_name: Optional protocol name for clearer error messages.

    Raises:
        AssertionError: If any required method is missing or not callable.
    """
    name = protocol_name or type(obj).__name__
    for method_name in required_methods:
        assert hasattr(obj, method_name), f"{name} must have '{method_name}' method"
        assert callable(getattr(obj, method_name)), f"{name}.{method_name} must be callable"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def isolated_topic_registry() -> Iterator[None]:
    """Run a test against empty declaration and default-domain registries.

    Message types decorated at import time by other test modules are
    restored afterwards.
    """
    saved_types = dict(registry._registered_types)
    saved_declarations = dict(registry._declaration_cache)
    saved_domains = dict(registry._default_domains)
    saved_partition_keys = dict(util_partition_key._partition_key_cache)
    registry._registered_types.clear()
    registry._declaration_cache.clear()
    registry._default_domains.clear()
    util_partition_key._partition_key_cache.clear()
    try:
        yield
    finally:
        registry._registered_types.clear()
        registry._registered_types.update(saved_types)
        registry._declaration_cache.clear()
        registry._declaration_cache.update(saved_declarations)
        registry._default_domains.clear()
        registry._default_domains.update(saved_domains)
        util_partition_key._partition_key_cache.clear()
        util_partition_key._partition_key_cache.update(saved_partition_keys)


@pytest.fixture
def messaging_configuration() -> ConfigurationTree:
    """Minimal configuration with a Messaging connection string."""
    return ConfigurationTree.from_mapping(
        {"ConnectionStrings": {"Messaging": "localhost:9092"}}
    )
