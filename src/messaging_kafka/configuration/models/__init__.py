# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka transport configuration models."""

from messaging_kafka.configuration.models.model_kafka_consumer_config import (
    ModelKafkaConsumerConfig,
)
from messaging_kafka.configuration.models.model_kafka_producer_config import (
    ModelKafkaProducerConfig,
)
from messaging_kafka.configuration.models.model_kafka_security_config import (
    ModelKafkaSecurityConfig,
)

__all__: list[str] = [
    "ModelKafkaConsumerConfig",
    "ModelKafkaProducerConfig",
    "ModelKafkaSecurityConfig",
]
