# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka acknowledgment enumeration for producer configuration."""

from enum import Enum

# aiokafka expects the string "all" or an integer acknowledgement count.
_AIOKAFKA_MAP: dict[str, str | int] = {
    "0": 0,
    "1": 1,
    "all": "all",
    "-1": -1,
}


class EnumKafkaAcks(str, Enum):
    """Enumeration for Kafka acknowledgment modes.

    Attributes:
        NONE: Fire and forget, no broker acknowledgement
        LEADER: Leader replica acknowledgement only
        ALL: Every in-sync replica acknowledges
        ALL_REPLICAS: Numeric alias of ALL (``-1``)
    """

    NONE = "0"
    LEADER = "1"
    ALL = "all"
    ALL_REPLICAS = "-1"

    def to_aiokafka(self) -> str | int:
        """Convert to the value accepted by ``AIOKafkaProducer(acks=...)``."""
        return _AIOKAFKA_MAP[self.value]


__all__ = ["EnumKafkaAcks"]
