# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility helpers shared across the messaging package.

Exports:
    describe_enum_choices: Render enum names for error messages
    match_enum_member: Case-insensitive enum lookup by name or value
    sanitize_bootstrap_servers: Strip credentials from broker addresses
    validate_topic_name: Kafka topic naming rules
"""

from messaging_kafka.utils.util_enum_parsing import (
    describe_enum_choices,
    match_enum_member,
)
from messaging_kafka.utils.util_sanitization import sanitize_bootstrap_servers
from messaging_kafka.utils.util_topic_validation import (
    MAX_TOPIC_LENGTH,
    validate_topic_name,
)

__all__: list[str] = [
    "MAX_TOPIC_LENGTH",
    "describe_enum_choices",
    "match_enum_member",
    "sanitize_bootstrap_servers",
    "validate_topic_name",
]
