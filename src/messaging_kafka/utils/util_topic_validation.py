# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Broker-side checks on generated topic names.

Declarations are validated segment by segment when they are registered.
This module checks the assembled ``<env>.<domain>.<scope>.<topic>[.<version>]``
name once the environment prefix is known, so a name the broker would refuse
fails at startup instead of on first publish.
"""

from __future__ import annotations

import re
from uuid import UUID

from messaging_kafka.enums import EnumInfraTransportType
from messaging_kafka.errors import ModelInfraErrorContext, ProtocolConfigurationError

MAX_TOPIC_LENGTH = 249

_LEGAL_TOPIC_RE = re.compile(r"^[a-zA-Z0-9._-]+$")
_RESERVED_TOPICS = frozenset({".", ".."})


def _find_topic_problem(topic: str) -> str | None:
    if not topic:
        return "Topic name cannot be empty"
    if len(topic) > MAX_TOPIC_LENGTH:
        return (
            f"Topic name '{topic}' is {len(topic)} characters and exceeds the "
            f"maximum length of {MAX_TOPIC_LENGTH}"
        )
    if topic in _RESERVED_TOPICS:
        return f"Topic name '{topic}' is reserved by Kafka"
    if not _LEGAL_TOPIC_RE.match(topic):
        return (
            f"Topic name '{topic}' may only contain letters, digits, "
            "'.', '_' and '-'"
        )
    return None


def validate_topic_name(
    topic: str,
    correlation_id: UUID | None = None,
) -> None:
    """Reject a generated topic name the broker would not accept.

    Raises:
        ProtocolConfigurationError: Carrying the topic as ``target_name``.
    """
    problem = _find_topic_problem(topic)
    if problem is None:
        return
    raise ProtocolConfigurationError(
        problem,
        context=ModelInfraErrorContext.with_correlation(
            correlation_id=correlation_id,
            transport_type=EnumInfraTransportType.KAFKA,
            operation="validate_topic_name",
            target_name=topic,
        ),
        parameter="topic",
    )


__all__: list[str] = ["MAX_TOPIC_LENGTH", "validate_topic_name"]
