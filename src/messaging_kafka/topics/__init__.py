# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topic declarations and deterministic topic naming.

Topic names follow ``<env-prefix>.<domain>.<scope>.<slug>[.<version>]`` and
are a pure function of a message type's declaration, its package default
domain, its module name and the environment name.

Exports:
    ModelTopicDeclaration: Per-message-type topic metadata
    ModelDefaultDomainDeclaration: Package-level default domain
    event_topic: Class decorator declaring a message type's topic
    default_domain: Build a package __default_domain__ declaration
    register_default_domain: Declare a package default domain at startup
    get_topic_declaration: Memoized declaration lookup
    registered_message_types: Every type decorated with event_topic
    validate_topic_declarations: Startup validation pass
    resolve_environment_prefix: Environment name -> topic prefix
    resolve_domain: Domain fallback chain
    build_topic_name: Pure topic name function
    get_topic_name: Topic name of a message type
    TopicNameGenerator: Generator bound to one environment
    PartitionKey: Partition key field marker
    get_partition_key_function: Partition key getter for a message type
"""

from messaging_kafka.topics.model_topic_declaration import (
    DEFAULT_TOPIC_VERSION,
    ModelDefaultDomainDeclaration,
    ModelTopicDeclaration,
)
from messaging_kafka.topics.registry_topic_declaration import (
    default_domain,
    event_topic,
    get_default_domain,
    get_topic_declaration,
    qualified_type_name,
    register_default_domain,
    registered_message_types,
    validate_topic_declaration,
    validate_topic_declarations,
)
from messaging_kafka.topics.topic_name_generator import (
    TopicNameGenerator,
    build_topic_name,
    get_topic_name,
    pluralize,
)
from messaging_kafka.topics.util_domain_resolution import resolve_domain
from messaging_kafka.topics.util_environment_prefix import (
    ENVIRONMENT_PREFIXES,
    resolve_environment_prefix,
)
from messaging_kafka.topics.util_partition_key import (
    PARTITION_KEY_DELIMITER,
    PartitionKey,
    PartitionKeyFunction,
    get_partition_key_function,
)

__all__: list[str] = [
    "DEFAULT_TOPIC_VERSION",
    "ENVIRONMENT_PREFIXES",
    "ModelDefaultDomainDeclaration",
    "ModelTopicDeclaration",
    "PARTITION_KEY_DELIMITER",
    "PartitionKey",
    "PartitionKeyFunction",
    "TopicNameGenerator",
    "build_topic_name",
    "default_domain",
    "event_topic",
    "get_default_domain",
    "get_partition_key_function",
    "get_topic_declaration",
    "get_topic_name",
    "pluralize",
    "qualified_type_name",
    "register_default_domain",
    "registered_message_types",
    "resolve_domain",
    "resolve_environment_prefix",
    "validate_topic_declaration",
    "validate_topic_declarations",
]
