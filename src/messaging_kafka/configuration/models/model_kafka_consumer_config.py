# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka consumer settings."""

from __future__ import annotations

from pydantic import Field

from messaging_kafka.configuration.models.model_kafka_security_config import (
    ModelKafkaSecurityConfig,
)
from messaging_kafka.enums import EnumAutoOffsetReset


class ModelKafkaConsumerConfig(ModelKafkaSecurityConfig):
    """Consumer tuning layered on the shared security settings.

    Defaults match aiokafka's ``AIOKafkaConsumer`` defaults.
    """

    group_id: str | None = Field(
        default=None,
        description="Consumer group id",
    )
    session_timeout_ms: int = Field(
        default=10000,
        ge=1,
        description="Group session timeout in milliseconds",
    )
    heartbeat_interval_ms: int = Field(
        default=3000,
        ge=1,
        description="Heartbeat interval in milliseconds",
    )
    max_poll_interval_ms: int = Field(
        default=300000,
        ge=1,
        description="Maximum delay between polls in milliseconds",
    )
    fetch_min_bytes: int = Field(
        default=1,
        ge=1,
        description="Minimum bytes returned by a fetch request",
    )
    auto_offset_reset: EnumAutoOffsetReset = Field(
        default=EnumAutoOffsetReset.LATEST,
        description="Start position when no committed offset exists",
    )
    enable_auto_commit: bool = Field(
        default=True,
        description="Commit offsets automatically in the background",
    )

    def to_aiokafka_kwargs(self) -> dict[str, object]:
        """Convert to ``AIOKafkaConsumer`` keyword arguments."""
        kwargs = super().to_aiokafka_kwargs()
        kwargs.update(
            session_timeout_ms=self.session_timeout_ms,
            heartbeat_interval_ms=self.heartbeat_interval_ms,
            max_poll_interval_ms=self.max_poll_interval_ms,
            fetch_min_bytes=self.fetch_min_bytes,
            auto_offset_reset=self.auto_offset_reset.value,
            enable_auto_commit=self.enable_auto_commit,
        )
        if self.group_id:
            kwargs["group_id"] = self.group_id
        return kwargs


__all__: list[str] = ["ModelKafkaConsumerConfig"]
