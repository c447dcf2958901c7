# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Host message bus extension point for the Kafka transport.

The host framework owns publishing, consuming and dispatch. Wiring hands it
one fully-bound registration at startup; the host then calls the topic name
generator carried in the registration whenever it publishes or subscribes.

Related:
    - KafkaBusWiring: Builds the registration and calls the host
    - ModelKafkaTransportRegistration: Payload handed to the host
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from messaging_kafka.wiring.model_kafka_transport_registration import (
        ModelKafkaTransportRegistration,
    )


@runtime_checkable
class ProtocolKafkaTransportHost(Protocol):
    """Protocol for message bus hosts accepting a Kafka transport."""

    def register_kafka_transport(
        self,
        registration: ModelKafkaTransportRegistration,
    ) -> None:
        """Register the bound Kafka transport with the host."""
        ...


__all__: list[str] = ["ProtocolKafkaTransportHost"]
