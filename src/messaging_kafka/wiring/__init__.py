# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka transport wiring into a host message bus.

Exports:
    KafkaBusWiring: Run-once startup wiring
    ProtocolKafkaTransportHost: Host extension point
    ModelKafkaTransportRegistration: Payload handed to the host
    ModelPublishRoute: Topic and partition key getter per message type
    TopicProvisioner: Best-effort topic creation
"""

from messaging_kafka.wiring.connection_resolver import (
    AUTO_PROVISION_KEY,
    CONNECTION_NAME_KEY,
    DEFAULT_CONNECTION_NAME,
    build_client_id,
    build_consumer_group_id,
    resolve_auto_provision,
    resolve_bootstrap_servers,
    resolve_connection_name,
)
from messaging_kafka.wiring.kafka_bus_wiring import KafkaBusWiring
from messaging_kafka.wiring.model_kafka_transport_registration import (
    ModelKafkaTransportRegistration,
    ModelPublishRoute,
)
from messaging_kafka.wiring.protocol_kafka_transport_host import (
    ProtocolKafkaTransportHost,
)
from messaging_kafka.wiring.service_topic_provisioner import TopicProvisioner

__all__: list[str] = [
    "AUTO_PROVISION_KEY",
    "CONNECTION_NAME_KEY",
    "DEFAULT_CONNECTION_NAME",
    "KafkaBusWiring",
    "ModelKafkaTransportRegistration",
    "ModelPublishRoute",
    "ProtocolKafkaTransportHost",
    "TopicProvisioner",
    "build_client_id",
    "build_consumer_group_id",
    "resolve_auto_provision",
    "resolve_bootstrap_servers",
    "resolve_connection_name",
]
