# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Messaging Enumerations Module.

Provides the enumerations used by topic resolution and transport binding.

Exports:
    EnumAutoOffsetReset: Consumer auto offset reset policy
    EnumInfraTransportType: Transport type used in error context
    EnumKafkaAcks: Producer acknowledgement mode
    EnumSaslMechanism: SASL authentication mechanism
    EnumSecurityProtocol: Kafka security protocol
    EnumTopicScope: Topic scope segment (PUBLIC, INTERNAL)
"""

from messaging_kafka.enums.enum_auto_offset_reset import EnumAutoOffsetReset
from messaging_kafka.enums.enum_infra_transport_type import EnumInfraTransportType
from messaging_kafka.enums.enum_kafka_acks import EnumKafkaAcks
from messaging_kafka.enums.enum_sasl_mechanism import EnumSaslMechanism
from messaging_kafka.enums.enum_security_protocol import EnumSecurityProtocol
from messaging_kafka.enums.enum_topic_scope import EnumTopicScope

__all__: list[str] = [
    "EnumAutoOffsetReset",
    "EnumInfraTransportType",
    "EnumKafkaAcks",
    "EnumSaslMechanism",
    "EnumSecurityProtocol",
    "EnumTopicScope",
]
