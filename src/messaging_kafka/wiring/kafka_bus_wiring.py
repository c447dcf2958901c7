# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Run-once startup wiring of the Kafka transport into a host message bus.

Startup Sequence:
    1. Resolve the connection name and its bootstrap servers (fatal if absent)
    2. Validate topic declarations of every published/subscribed message type
    3. Derive consumer group id and client id
    4. Bind producer, consumer and security settings from configuration
    5. Decide topic auto-provisioning
    6. Resolve publish routes and subscription topics
    7. Hand the registration to ``host.register_kafka_transport``

Any failure raises before the host is touched, so a misconfigured process
never starts serving messages.

Usage:
    ```python
    tree = ConfigurationTree.from_yaml("messaging.yaml").merge(
        ConfigurationTree.from_env(),
    )
    wiring = KafkaBusWiring(tree, "Development", "orders")
    wiring.configure(host, publish_types=[OrderPlaced], subscribe_types=[PaymentCaptured])
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from messaging_kafka.configuration import (
    DEFAULT_PLATFORM_ROOT,
    ConfigurationTree,
    bind_transport_configs,
)
from messaging_kafka.enums import EnumInfraTransportType
from messaging_kafka.errors import ModelInfraErrorContext, ProtocolConfigurationError
from messaging_kafka.topics import (
    TopicNameGenerator,
    get_partition_key_function,
    get_topic_declaration,
    qualified_type_name,
    registered_message_types,
    validate_topic_declarations,
)
from messaging_kafka.utils import sanitize_bootstrap_servers, validate_topic_name
from messaging_kafka.wiring.connection_resolver import (
    build_client_id,
    build_consumer_group_id,
    resolve_auto_provision,
    resolve_bootstrap_servers,
    resolve_connection_name,
)
from messaging_kafka.wiring.model_kafka_transport_registration import (
    ModelKafkaTransportRegistration,
    ModelPublishRoute,
)
from messaging_kafka.wiring.protocol_kafka_transport_host import (
    ProtocolKafkaTransportHost,
)

logger = logging.getLogger(__name__)


class KafkaBusWiring:
    """Builds the Kafka transport registration and hands it to the host.

    Args:
        configuration: Configuration tree.
        environment_name: Host environment name (``"Development"``).
        service_name: Logical service name, the consumer group base.
        connection_name: Connection name; read from
            ``Kafka:ConnectionStringName`` (default ``"Messaging"``) when omitted.
        platform_root: Section holding transport settings.
        application_name: Source of the client id; defaults to the service name.
    """

    def __init__(
        self,
        configuration: ConfigurationTree,
        environment_name: str,
        service_name: str,
        *,
        connection_name: str | None = None,
        platform_root: str = DEFAULT_PLATFORM_ROOT,
        application_name: str | None = None,
    ) -> None:
        self._configuration = configuration
        self._environment_name = environment_name
        self._service_name = service_name
        self._connection_name = connection_name
        self._platform_root = platform_root
        self._application_name = application_name or service_name
        self._topic_name_generator = TopicNameGenerator(environment_name)
        self._registration: ModelKafkaTransportRegistration | None = None

    @property
    def topic_name_generator(self) -> TopicNameGenerator:
        """Generator bound to this wiring's environment."""
        return self._topic_name_generator

    @property
    def is_configured(self) -> bool:
        """Whether ``configure`` has completed."""
        return self._registration is not None

    @property
    def registration(self) -> ModelKafkaTransportRegistration | None:
        """Registration handed to the host, once configured."""
        return self._registration

    def build_registration(
        self,
        publish_types: Iterable[type] | None = None,
        subscribe_types: Iterable[type] | None = None,
    ) -> ModelKafkaTransportRegistration:
        """Resolve, validate and bind everything the host needs.

        Args:
            publish_types: Published message types; every ``event_topic``
                type when omitted.
            subscribe_types: Consumed message types; every ``event_topic``
                type when omitted.

        Raises:
            MissingConnectionStringError: If the bootstrap servers are absent.
            TopicDeclarationError: If any declaration is malformed.
            ConfigurationParseError: If a configured value is malformed.
            ProtocolConfigurationError: If a generated topic name is invalid.
        """
        tree = self._configuration
        connection_name = self._connection_name or resolve_connection_name(tree)
        bootstrap_servers = resolve_bootstrap_servers(tree, connection_name)

        publish = tuple(registered_message_types() if publish_types is None else publish_types)
        subscribe = tuple(
            registered_message_types() if subscribe_types is None else subscribe_types
        )
        validate_topic_declarations(dict.fromkeys(publish + subscribe))

        environment_prefix = self._topic_name_generator.environment_prefix
        producer_config, consumer_config = bind_transport_configs(
            tree,
            connection_name,
            bootstrap_servers,
            platform_root=self._platform_root,
            client_id=build_client_id(self._application_name),
            group_id=build_consumer_group_id(self._service_name, environment_prefix),
        )
        auto_provision = resolve_auto_provision(tree, environment_prefix)

        routes = tuple(self._build_routes(publish))
        subscribed_topics = tuple(
            sorted({topic for topic in map(self._resolve_topic, subscribe) if topic})
        )

        registration = ModelKafkaTransportRegistration(
            connection_name=connection_name,
            bootstrap_servers=bootstrap_servers,
            environment_name=self._environment_name,
            environment_prefix=environment_prefix,
            service_name=self._service_name,
            client_id=producer_config.client_id,
            consumer_group_id=consumer_config.group_id,
            auto_provision=auto_provision,
            producer_config=producer_config,
            consumer_config=consumer_config,
            topic_name_generator=self._topic_name_generator,
            publish_routes=routes,
            subscribed_topics=subscribed_topics,
        )
        logger.info(
            "Built Kafka transport registration for service '%s'",
            self._service_name,
            extra={
                "connection_name": connection_name,
                "bootstrap_servers": sanitize_bootstrap_servers(bootstrap_servers),
                "environment_prefix": environment_prefix,
                "consumer_group_id": registration.consumer_group_id,
                "client_id": registration.client_id,
                "auto_provision": auto_provision,
                "publish_route_count": len(routes),
                "subscribed_topic_count": len(subscribed_topics),
            },
        )
        return registration

    def configure(
        self,
        host: ProtocolKafkaTransportHost,
        publish_types: Iterable[type] | None = None,
        subscribe_types: Iterable[type] | None = None,
    ) -> ModelKafkaTransportRegistration:
        """Build the registration and register it with ``host``. Runs once.

        Raises:
            ProtocolConfigurationError: If already configured, or any error
                raised by ``build_registration``.
        """
        if self._registration is not None:
            raise ProtocolConfigurationError(
                f"Kafka transport for service '{self._service_name}' is already configured",
                context=ModelInfraErrorContext.with_correlation(
                    transport_type=EnumInfraTransportType.RUNTIME,
                    operation="configure",
                    target_name=self._service_name,
                ),
            )
        registration = self.build_registration(publish_types, subscribe_types)
        host.register_kafka_transport(registration)
        self._registration = registration
        logger.info(
            "Registered Kafka transport with host",
            extra={"service_name": self._service_name, "host": type(host).__name__},
        )
        return registration

    def _build_routes(self, message_types: Iterable[type]) -> Iterable[ModelPublishRoute]:
        for message_type in message_types:
            topic = self._resolve_topic(message_type)
            if topic is None:
                continue
            yield ModelPublishRoute(
                message_type=message_type,
                topic=topic,
                partition_key=get_partition_key_function(message_type),
            )

    def _resolve_topic(self, message_type: type) -> str | None:
        declaration = get_topic_declaration(message_type)
        if declaration is None:
            logger.warning(
                "Message type %s has no topic declaration, skipping",
                qualified_type_name(message_type),
                extra={"message_type": qualified_type_name(message_type)},
            )
            return None
        topic = self._topic_name_generator.get_topic_name(message_type, declaration)
        validate_topic_name(topic)
        logger.debug(
            "Resolved topic",
            extra={"message_type": qualified_type_name(message_type), "topic": topic},
        )
        return topic

    def __repr__(self) -> str:
        return (
            f"KafkaBusWiring(service_name={self._service_name!r}, "
            f"environment_name={self._environment_name!r}, "
            f"configured={self.is_configured})"
        )


__all__: list[str] = ["KafkaBusWiring"]
