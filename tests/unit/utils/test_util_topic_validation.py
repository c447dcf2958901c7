# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for topic name validation and credential sanitization."""

import pytest

from messaging_kafka.errors import ProtocolConfigurationError
from messaging_kafka.utils import (
    MAX_TOPIC_LENGTH,
    sanitize_bootstrap_servers,
    validate_topic_name,
)


class TestValidateTopicName:
    """Tests for validate_topic_name."""

    @pytest.mark.parametrize(
        "topic",
        [
            "dev.sales.public.customers.v1",
            "prod.billing.internal.invoice-paid",
            "a" * MAX_TOPIC_LENGTH,
        ],
    )
    def test_valid_topics(self, topic: str) -> None:
        """Generated topic shapes are accepted."""
        validate_topic_name(topic)

    @pytest.mark.parametrize(
        "topic",
        ["", ".", "..", "bad topic!", "a" * (MAX_TOPIC_LENGTH + 1)],
    )
    def test_invalid_topics(self, topic: str) -> None:
        """Empty, reserved, illegal or over-long names are rejected."""
        with pytest.raises(ProtocolConfigurationError):
            validate_topic_name(topic)

    def test_error_names_topic_and_length(self) -> None:
        """Over-long names report their length and carry the topic as target."""
        topic = "dev." + "a" * MAX_TOPIC_LENGTH
        with pytest.raises(ProtocolConfigurationError, match="maximum length of 249") as exc_info:
            validate_topic_name(topic)
        assert f"{len(topic)} characters" in str(exc_info.value)
        assert exc_info.value.extra_context["target_name"] == topic
        assert exc_info.value.extra_context["parameter"] == "topic"


class TestSanitizeBootstrapServers:
    """Tests for sanitize_bootstrap_servers."""

    def test_strips_credentials(self) -> None:
        """Credentials before '@' are removed from every server."""
        assert (
            sanitize_bootstrap_servers("user:pass@kafka1:9092, kafka2:9092")
            == "kafka1:9092,kafka2:9092"
        )

    def test_empty_is_unknown(self) -> None:
        """An empty string is reported as unknown."""
        assert sanitize_bootstrap_servers("") == "unknown"
