# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for topic declaration registration and validation.

Tests cover:
- event_topic decorator attaching and registering declarations
- Inheritance and memoized lookup
- Package default domains (registered and module attribute)
- Authoring-time and startup validation
"""

from __future__ import annotations

import sys
import types
from unittest.mock import patch

import pytest
from pydantic import BaseModel, ValidationError

from messaging_kafka.errors import TopicDeclarationError
from messaging_kafka.topics import (
    ModelDefaultDomainDeclaration,
    ModelTopicDeclaration,
    default_domain,
    event_topic,
    get_default_domain,
    get_topic_declaration,
    register_default_domain,
    registered_message_types,
    validate_topic_declarations,
)

pytestmark = pytest.mark.usefixtures("isolated_topic_registry")


class TestModelTopicDeclaration:
    """Tests for the declaration model."""

    def test_defaults(self) -> None:
        """Defaults: no domain, version v1, public, not pluralized."""
        declaration = ModelTopicDeclaration(topic="customer")
        assert declaration.domain is None
        assert declaration.version == "v1"
        assert declaration.internal is False
        assert declaration.pluralize is False

    def test_immutable(self) -> None:
        """Declarations cannot be mutated after creation."""
        declaration = ModelTopicDeclaration(topic="customer")
        with pytest.raises(ValidationError):
            declaration.topic = "other"  # type: ignore[misc]


class TestEventTopicDecorator:
    """Tests for the event_topic decorator."""

    def test_attaches_and_registers(self) -> None:
        """The decorator attaches the declaration and registers the type."""

        @event_topic("order-placed", domain="orders", version="v2", internal=True)
        class OrderPlaced(BaseModel):
            order_id: str

        declaration = get_topic_declaration(OrderPlaced)
        assert declaration == ModelTopicDeclaration(
            topic="order-placed", domain="orders", version="v2", internal=True
        )
        assert registered_message_types() == (OrderPlaced,)

    def test_returns_class_unchanged(self) -> None:
        """The decorated class is returned as-is."""

        class Plain:
            pass

        assert event_topic("plain")(Plain) is Plain

    def test_declaration_is_inherited(self) -> None:
        """Subclasses inherit the parent's declaration."""

        @event_topic("customer", domain="sales")
        class CustomerEvent:
            pass

        class CustomerCreated(CustomerEvent):
            pass

        assert get_topic_declaration(CustomerCreated) == get_topic_declaration(CustomerEvent)

    def test_lookup_is_memoized(self) -> None:
        """Repeated lookups return the same declaration object."""

        @event_topic("customer")
        class CustomerCreated:
            pass

        assert get_topic_declaration(CustomerCreated) is get_topic_declaration(
            CustomerCreated
        )

    def test_undeclared_type_returns_none(self) -> None:
        """Types without a declaration return None."""

        class Undeclared:
            pass

        assert get_topic_declaration(Undeclared) is None

    @pytest.mark.parametrize(
        ("topic", "kwargs", "fragment"),
        [
            ("", {}, "must not be empty"),
            ("   ", {}, "must not be empty"),
            ("orders.placed", {}, "topic slug"),
            ("order placed", {}, "topic slug"),
            ("placed", {"domain": "sales.eu"}, "domain"),
            ("placed", {"version": "1.0"}, "version"),
            ("x" * 240, {"domain": "sales"}, "limited to 249"),
            ("x" * 245, {"pluralize": True}, "limited to 249"),
        ],
    )
    def test_invalid_declaration_fails_at_decoration(
        self, topic: str, kwargs: dict[str, str], fragment: str
    ) -> None:
        """Malformed declarations raise when the class is decorated."""
        with pytest.raises(TopicDeclarationError, match=fragment) as exc_info:

            @event_topic(topic, **kwargs)  # type: ignore[arg-type]
            class Broken:
                pass

        assert "Broken" in exc_info.value.message_types[0]
        assert registered_message_types() == ()

    def test_wrong_attribute_type_raises(self) -> None:
        """A hand-written attribute of the wrong type is rejected."""

        class Broken:
            __event_topic__ = "customer"

        with pytest.raises(TopicDeclarationError, match="must be a ModelTopicDeclaration"):
            get_topic_declaration(Broken)


class TestDefaultDomain:
    """Tests for package default domains."""

    def test_registered_default_domain(self) -> None:
        """register_default_domain applies to the package and submodules."""
        register_default_domain("sales_contracts", "sales")
        assert get_default_domain("sales_contracts.events.customer") == "sales"
        assert get_default_domain("billing.events") is None

    def test_most_specific_package_wins(self) -> None:
        """The closest registered package wins."""
        register_default_domain("acme", "platform")
        register_default_domain("acme.billing", "billing")
        assert get_default_domain("acme.billing.events") == "billing"
        assert get_default_domain("acme.orders.events") == "platform"

    def test_module_attribute(self) -> None:
        """__default_domain__ on a loaded package is honoured."""
        package = types.ModuleType("crm_contracts")
        package.__default_domain__ = default_domain("crm")  # type: ignore[attr-defined]
        with patch.dict(sys.modules, {"crm_contracts": package}):
            assert get_default_domain("crm_contracts.events") == "crm"

    def test_registered_beats_module_attribute(self) -> None:
        """An explicit registration wins over the module attribute."""
        package = types.ModuleType("crm_contracts")
        package.__default_domain__ = "crm"  # type: ignore[attr-defined]
        register_default_domain("crm_contracts", "customers")
        with patch.dict(sys.modules, {"crm_contracts": package}):
            assert get_default_domain("crm_contracts") == "customers"

    @pytest.mark.parametrize("domain", ["", "  ", "sales.eu"])
    def test_invalid_default_domain(self, domain: str) -> None:
        """Blank or dotted default domains are rejected."""
        with pytest.raises(TopicDeclarationError):
            register_default_domain("sales_contracts", domain)

    @pytest.mark.parametrize(
        "declared",
        [
            "sales.eu",
            default_domain("sales").model_copy(update={"domain": "sales.eu"}),
        ],
    )
    def test_dotted_module_attribute_is_rejected(self, declared: object) -> None:
        """A dotted __default_domain__ never reaches a topic name."""
        package = types.ModuleType("eu_contracts")
        package.__default_domain__ = declared  # type: ignore[attr-defined]
        with patch.dict(sys.modules, {"eu_contracts": package}):
            with pytest.raises(TopicDeclarationError, match="eu_contracts"):
                get_default_domain("eu_contracts.events")

    def test_default_domain_helper(self) -> None:
        """default_domain builds a validated declaration."""
        assert default_domain("sales") == ModelDefaultDomainDeclaration(domain="sales")
        with pytest.raises(TopicDeclarationError, match="sales_contracts"):
            default_domain("sales.eu", package="sales_contracts")


class TestValidateTopicDeclarations:
    """Tests for the startup validation pass."""

    def test_counts_declared_types(self) -> None:
        """Declared types are counted; undeclared ones are ignored."""

        @event_topic("customer")
        class CustomerCreated:
            pass

        class Undeclared:
            pass

        assert validate_topic_declarations([CustomerCreated, Undeclared]) == 1

    def test_reports_every_failure(self) -> None:
        """All offending types are reported together."""

        class EmptySlug:
            __event_topic__ = ModelTopicDeclaration(topic="")

        class DottedDomain:
            __event_topic__ = ModelTopicDeclaration(topic="ok", domain="a.b")

        @event_topic("fine")
        class Fine:
            pass

        with pytest.raises(TopicDeclarationError) as exc_info:
            validate_topic_declarations([EmptySlug, Fine, DottedDomain])

        error = exc_info.value
        assert "2 message type(s)" in str(error)
        assert len(error.message_types) == 2
        assert error.message_types[0].endswith("EmptySlug")
        assert error.message_types[1].endswith("DottedDomain")

    def test_dotted_package_default_is_reported(self) -> None:
        """Types inheriting a dotted package default fail the pass."""

        @event_topic("customer")
        class CustomerCreated:
            __module__ = "eu_contracts.events"

        @event_topic("invoice", domain="billing")
        class InvoicePaid:
            __module__ = "eu_contracts.events"

        package = types.ModuleType("eu_contracts")
        package.__default_domain__ = "sales.eu"  # type: ignore[attr-defined]
        with patch.dict(sys.modules, {"eu_contracts": package}):
            with pytest.raises(TopicDeclarationError, match="sales.eu") as exc_info:
                validate_topic_declarations([CustomerCreated, InvoicePaid])

        (offender,) = exc_info.value.message_types
        assert offender.startswith("eu_contracts.events.")
        assert offender.endswith("CustomerCreated")
