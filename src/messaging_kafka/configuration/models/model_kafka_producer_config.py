# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka producer settings."""

from __future__ import annotations

from pydantic import Field

from messaging_kafka.configuration.models.model_kafka_security_config import (
    ModelKafkaSecurityConfig,
)
from messaging_kafka.enums import EnumKafkaAcks


class ModelKafkaProducerConfig(ModelKafkaSecurityConfig):
    """Producer tuning layered on the shared security settings.

    ``max_in_flight`` and ``message_send_max_retries`` have no aiokafka
    keyword; they are carried for hosts that drive other client libraries
    and are left out of ``to_aiokafka_kwargs``.

    Attributes:
        enable_idempotence: Exactly-once delivery per partition
        max_in_flight: Max unacknowledged requests per connection
        acks: Broker acknowledgement mode (None lets aiokafka decide)
        message_send_max_retries: Max send retries before failing
    """

    enable_idempotence: bool = Field(
        default=False,
        description="Enable idempotent producer",
    )
    max_in_flight: int | None = Field(
        default=None,
        ge=1,
        description="Maximum in-flight requests per connection",
    )
    acks: EnumKafkaAcks | None = Field(
        default=None,
        description="Acknowledgement mode",
    )
    message_send_max_retries: int | None = Field(
        default=None,
        ge=0,
        description="Maximum send retries",
    )

    def to_aiokafka_kwargs(self) -> dict[str, object]:
        """Convert to ``AIOKafkaProducer`` keyword arguments."""
        kwargs = super().to_aiokafka_kwargs()
        kwargs["enable_idempotence"] = self.enable_idempotence
        if self.acks is not None:
            kwargs["acks"] = self.acks.to_aiokafka()
        return kwargs


__all__: list[str] = ["ModelKafkaProducerConfig"]
