# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for KafkaBusWiring.

Tests cover:
- Registration contents (configs, identities, routes, subscriptions)
- Fatal missing connection string before the host is touched
- Declaration validation and skipping undeclared types
- Run-once configure with a mocked host
"""

from __future__ import annotations

import logging
import sys
import types
from typing import Annotated
from unittest.mock import MagicMock, patch

import pytest
from pydantic import BaseModel

from messaging_kafka.configuration import ConfigurationTree
from messaging_kafka.enums import EnumSecurityProtocol
from messaging_kafka.errors import (
    MissingConnectionStringError,
    ProtocolConfigurationError,
    TopicDeclarationError,
)
from messaging_kafka.topics import ModelTopicDeclaration, PartitionKey, event_topic
from messaging_kafka.wiring import (
    KafkaBusWiring,
    ModelKafkaTransportRegistration,
    ProtocolKafkaTransportHost,
)
from tests.conftest import assert_has_methods


@event_topic("order-placed", domain="orders")
class OrderPlaced(BaseModel):
    tenant_id: Annotated[str, PartitionKey()]
    order_id: str


@event_topic("customer", domain="sales", pluralize=True)
class CustomerCreated(BaseModel):
    customer_id: str


@event_topic("payment-captured", domain="payments", internal=True, version="v2")
class PaymentCaptured(BaseModel):
    payment_id: str


class Undeclared(BaseModel):
    value: int


def _host() -> MagicMock:
    return MagicMock(spec=ProtocolKafkaTransportHost)


class TestBuildRegistration:
    """Tests for KafkaBusWiring.build_registration."""

    def test_registration_contents(self, messaging_configuration: ConfigurationTree) -> None:
        """The registration carries every resolved decision."""
        wiring = KafkaBusWiring(
            messaging_configuration,
            "Development",
            "orders",
            application_name="Orders.Api",
        )
        registration = wiring.build_registration(
            publish_types=[OrderPlaced, CustomerCreated],
            subscribe_types=[PaymentCaptured, CustomerCreated, PaymentCaptured],
        )

        assert registration.connection_name == "Messaging"
        assert registration.bootstrap_servers == "localhost:9092"
        assert registration.environment_prefix == "dev"
        assert registration.consumer_group_id == "orders-dev"
        assert registration.client_id == "orders-api"
        assert registration.auto_provision is True
        assert registration.consumer_config.group_id == "orders-dev"
        assert registration.producer_config.client_id == "orders-api"
        assert registration.topic_name_generator is wiring.topic_name_generator
        assert registration.subscribed_topics == (
            "dev.payments.internal.payment-captured.v2",
            "dev.sales.public.customers.v1",
        )
        assert registration.published_topics == (
            "dev.orders.public.order-placed.v1",
            "dev.sales.public.customers.v1",
        )

    def test_publish_routes_carry_partition_keys(
        self, messaging_configuration: ConfigurationTree
    ) -> None:
        """Routes carry the partition key getter of keyed types."""
        wiring = KafkaBusWiring(messaging_configuration, "Development", "orders")
        registration = wiring.build_registration(
            publish_types=[OrderPlaced, CustomerCreated], subscribe_types=[]
        )

        keyed = registration.route_for(OrderPlaced)
        assert keyed is not None
        assert keyed.partition_key is not None
        assert keyed.partition_key(OrderPlaced(tenant_id="acme", order_id="o-1")) == "acme"

        unkeyed = registration.route_for(CustomerCreated)
        assert unkeyed is not None
        assert unkeyed.partition_key is None
        assert registration.route_for(PaymentCaptured) is None

    def test_production_defaults(self) -> None:
        """Production disables auto-provisioning and uses the prod prefix."""
        tree = ConfigurationTree.from_mapping(
            {"ConnectionStrings": {"Messaging": "kafka-prod:9092"}}
        )
        registration = KafkaBusWiring(tree, "Production", "billing").build_registration(
            publish_types=[CustomerCreated], subscribe_types=[]
        )
        assert registration.auto_provision is False
        assert registration.consumer_group_id == "billing-prod"
        assert registration.published_topics == ("prod.sales.public.customers.v1",)

    def test_configuration_is_bound(self) -> None:
        """Security, group id and connection name come from configuration."""
        tree = ConfigurationTree.from_mapping(
            {
                "ConnectionStrings": {"Events": "kafka:9093"},
                "Kafka": {
                    "ConnectionStringName": "Events",
                    "AutoProvision": "false",
                    "Security": {"SecurityProtocol": "SaslSsl"},
                    "Consumer": {"Events": {"Config": {"GroupId": "legacy"}}},
                },
            }
        )
        registration = KafkaBusWiring(tree, "Development", "orders").build_registration(
            publish_types=[], subscribe_types=[]
        )
        assert registration.connection_name == "Events"
        assert registration.bootstrap_servers == "kafka:9093"
        assert registration.auto_provision is False
        assert registration.consumer_group_id == "legacy"
        assert registration.producer_config.security_protocol is EnumSecurityProtocol.SASL_SSL
        assert registration.consumer_config.security_protocol is EnumSecurityProtocol.SASL_SSL

    def test_explicit_connection_name(self) -> None:
        """An explicit connection name skips the configured lookup."""
        tree = ConfigurationTree.from_mapping(
            {"ConnectionStrings": {"Audit": "kafka-audit:9092"}}
        )
        registration = KafkaBusWiring(
            tree, "Development", "audit", connection_name="Audit"
        ).build_registration(publish_types=[], subscribe_types=[])
        assert registration.bootstrap_servers == "kafka-audit:9092"

    def test_missing_connection_string_is_fatal(self) -> None:
        """Without a connection string nothing is built."""
        wiring = KafkaBusWiring(ConfigurationTree(), "Development", "orders")
        with pytest.raises(MissingConnectionStringError, match="Messaging"):
            wiring.build_registration(publish_types=[OrderPlaced])

    def test_undeclared_types_are_skipped(
        self,
        messaging_configuration: ConfigurationTree,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Types without a declaration are skipped with a warning."""
        wiring = KafkaBusWiring(messaging_configuration, "Development", "orders")
        with caplog.at_level(logging.WARNING):
            registration = wiring.build_registration(
                publish_types=[Undeclared, CustomerCreated], subscribe_types=[Undeclared]
            )
        assert registration.published_topics == ("dev.sales.public.customers.v1",)
        assert registration.subscribed_topics == ()
        assert "no topic declaration" in caplog.text

    def test_invalid_declaration_is_fatal(
        self, messaging_configuration: ConfigurationTree
    ) -> None:
        """Malformed declarations fail the validation pass."""

        class EmptySlug(BaseModel):
            __event_topic__ = ModelTopicDeclaration(topic="")

        wiring = KafkaBusWiring(messaging_configuration, "Development", "orders")
        with pytest.raises(TopicDeclarationError):
            wiring.build_registration(publish_types=[EmptySlug])

    @pytest.mark.usefixtures("isolated_topic_registry")
    def test_over_long_topic_is_rejected(
        self, messaging_configuration: ConfigurationTree
    ) -> None:
        """Generated names are checked against Kafka limits."""

        @event_topic("x" * 230, domain="orders")
        class Huge(BaseModel):
            pass

        wiring = KafkaBusWiring(messaging_configuration, "Development", "orders")
        with pytest.raises(ProtocolConfigurationError, match="maximum length"):
            wiring.build_registration(publish_types=[Huge], subscribe_types=[])

    @pytest.mark.usefixtures("isolated_topic_registry")
    def test_defaults_to_registered_types(
        self, messaging_configuration: ConfigurationTree
    ) -> None:
        """Without explicit types every event_topic type is used."""

        @event_topic("shipment", domain="logistics")
        class ShipmentDispatched(BaseModel):
            shipment_id: str

        registration = KafkaBusWiring(
            messaging_configuration, "Development", "logistics"
        ).build_registration()
        assert registration.published_topics == ("dev.logistics.public.shipment.v1",)
        assert registration.subscribed_topics == ("dev.logistics.public.shipment.v1",)


class TestConfigure:
    """Tests for KafkaBusWiring.configure."""

    def test_host_protocol_shape(self) -> None:
        """The host protocol exposes register_kafka_transport."""
        assert_has_methods(
            _host(), ["register_kafka_transport"], protocol_name="ProtocolKafkaTransportHost"
        )

    def test_registers_with_host(self, messaging_configuration: ConfigurationTree) -> None:
        """configure hands the registration to the host."""
        host = _host()
        wiring = KafkaBusWiring(messaging_configuration, "Development", "orders")

        registration = wiring.configure(host, publish_types=[OrderPlaced], subscribe_types=[])

        host.register_kafka_transport.assert_called_once_with(registration)
        assert isinstance(registration, ModelKafkaTransportRegistration)
        assert wiring.is_configured
        assert wiring.registration is registration

    def test_runs_once(self, messaging_configuration: ConfigurationTree) -> None:
        """A second configure is rejected."""
        host = _host()
        wiring = KafkaBusWiring(messaging_configuration, "Development", "orders")
        wiring.configure(host, publish_types=[], subscribe_types=[])

        with pytest.raises(ProtocolConfigurationError, match="already configured"):
            wiring.configure(host, publish_types=[], subscribe_types=[])
        host.register_kafka_transport.assert_called_once()

    def test_failure_leaves_host_untouched(self) -> None:
        """A fatal configuration error never reaches the host."""
        host = _host()
        wiring = KafkaBusWiring(ConfigurationTree(), "Development", "orders")

        with pytest.raises(MissingConnectionStringError):
            wiring.configure(host)

        host.register_kafka_transport.assert_not_called()
        assert not wiring.is_configured

    @pytest.mark.usefixtures("isolated_topic_registry")
    def test_dotted_package_default_never_reaches_host(
        self, messaging_configuration: ConfigurationTree
    ) -> None:
        """A dotted package default domain fails configure before the host."""

        @event_topic("customer")
        class CustomerCreated:
            __module__ = "eu_contracts.events"

        package = types.ModuleType("eu_contracts")
        package.__default_domain__ = "sales.eu"  # type: ignore[attr-defined]
        host = _host()
        wiring = KafkaBusWiring(messaging_configuration, "Development", "orders")

        with patch.dict(sys.modules, {"eu_contracts": package}):
            with pytest.raises(TopicDeclarationError, match="sales.eu"):
                wiring.configure(host, publish_types=[CustomerCreated], subscribe_types=[])

        host.register_kafka_transport.assert_not_called()
        assert not wiring.is_configured
