# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registration payload handed to the host message bus."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from messaging_kafka.configuration.models import (
    ModelKafkaConsumerConfig,
    ModelKafkaProducerConfig,
)
from messaging_kafka.topics import PartitionKeyFunction, TopicNameGenerator


class ModelPublishRoute(BaseModel):
    """Where one message type is published.

    Attributes:
        message_type: Message class
        topic: Resolved topic name
        partition_key: Getter for the message key, None when unkeyed
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    message_type: type = Field(description="Message class")
    topic: str = Field(min_length=1, description="Resolved topic name")
    partition_key: PartitionKeyFunction | None = Field(
        default=None,
        description="Partition key getter, None when no field is marked",
    )


class ModelKafkaTransportRegistration(BaseModel):
    """Everything the host needs to run the Kafka transport.

    Attributes:
        connection_name: Configured connection name
        bootstrap_servers: Resolved bootstrap servers
        environment_name: Host environment name
        environment_prefix: Topic namespace prefix
        service_name: Logical service name
        client_id: Client id reported to brokers
        consumer_group_id: Consumer group id
        auto_provision: Whether missing topics should be created
        producer_config: Bound producer settings
        consumer_config: Bound consumer settings
        topic_name_generator: Generator bound to the environment
        publish_routes: Topic per published message type
        subscribed_topics: Sorted, de-duplicated subscription topics
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    connection_name: str = Field(description="Configured connection name")
    bootstrap_servers: str = Field(min_length=1, description="Bootstrap servers")
    environment_name: str = Field(description="Host environment name")
    environment_prefix: str = Field(description="Topic namespace prefix")
    service_name: str = Field(description="Logical service name")
    client_id: str | None = Field(default=None, description="Kafka client id")
    consumer_group_id: str = Field(description="Consumer group id")
    auto_provision: bool = Field(description="Create missing topics on demand")
    producer_config: ModelKafkaProducerConfig = Field(description="Producer settings")
    consumer_config: ModelKafkaConsumerConfig = Field(description="Consumer settings")
    topic_name_generator: TopicNameGenerator = Field(
        description="Topic name generator bound to the environment",
    )
    publish_routes: tuple[ModelPublishRoute, ...] = Field(
        default=(),
        description="Topic per published message type",
    )
    subscribed_topics: tuple[str, ...] = Field(
        default=(),
        description="Topics consumed by this service",
    )

    @property
    def published_topics(self) -> tuple[str, ...]:
        """Sorted, de-duplicated publish topics."""
        return tuple(sorted({route.topic for route in self.publish_routes}))

    def route_for(self, message_type: type) -> ModelPublishRoute | None:
        """Return the publish route of ``message_type``, if any."""
        for route in self.publish_routes:
            if route.message_type is message_type:
                return route
        return None


__all__: list[str] = ["ModelKafkaTransportRegistration", "ModelPublishRoute"]
