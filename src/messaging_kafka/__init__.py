# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka messaging integration - topic naming and transport binding.

Connects typed in-process message definitions to wire-level Kafka topics:

- Topic declarations on message types and deterministic topic names
  (``<env>.<domain>.<scope>.<slug>[.<version>]``)
- Case-insensitive configuration tree from mappings, YAML and environment
- Producer/consumer/security settings bound from configuration
- Run-once wiring into a host message bus, plus best-effort topic creation

Key Components:
    - event_topic: Class decorator declaring a message type's topic
    - TopicNameGenerator: Resolves topic names for one environment
    - ConfigurationTree: Configuration source
    - KafkaBusWiring: Startup wiring into the host message bus
"""

from messaging_kafka.configuration import ConfigurationTree
from messaging_kafka.topics import (
    PartitionKey,
    TopicNameGenerator,
    default_domain,
    event_topic,
    get_topic_name,
    register_default_domain,
)
from messaging_kafka.wiring import KafkaBusWiring, TopicProvisioner

__all__: list[str] = [
    "ConfigurationTree",
    "KafkaBusWiring",
    "PartitionKey",
    "TopicNameGenerator",
    "TopicProvisioner",
    "default_domain",
    "event_topic",
    "get_topic_name",
    "register_default_domain",
]
