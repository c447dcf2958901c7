# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Messaging Configuration Module.

Exports:
    ConfigurationTree: Case-insensitive, colon-delimited configuration tree
    ModelKafkaSecurityConfig: Shared connection and security settings
    ModelKafkaProducerConfig: Producer settings
    ModelKafkaConsumerConfig: Consumer settings
    bind_transport_configs: Build producer/consumer settings for a connection
"""

from messaging_kafka.configuration.configuration_tree import (
    CONNECTION_STRINGS_SECTION,
    ConfigurationTree,
    join_key,
)
from messaging_kafka.configuration.models import (
    ModelKafkaConsumerConfig,
    ModelKafkaProducerConfig,
    ModelKafkaSecurityConfig,
)
from messaging_kafka.configuration.transport_config_binder import (
    DEFAULT_PLATFORM_ROOT,
    bind_consumer_config,
    bind_producer_config,
    bind_security_config,
    bind_transport_configs,
    parse_bool,
)

__all__: list[str] = [
    "CONNECTION_STRINGS_SECTION",
    "DEFAULT_PLATFORM_ROOT",
    "ConfigurationTree",
    "ModelKafkaConsumerConfig",
    "ModelKafkaProducerConfig",
    "ModelKafkaSecurityConfig",
    "bind_consumer_config",
    "bind_producer_config",
    "bind_security_config",
    "bind_transport_configs",
    "join_key",
    "parse_bool",
]
