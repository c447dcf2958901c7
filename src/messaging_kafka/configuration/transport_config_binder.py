# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bind the configuration tree onto Kafka transport settings.

Well-known leaves are read from fixed paths under the platform root
(``Kafka`` unless overridden). Shared sections are applied first and
connection-specific sections second, so the more specific value wins::

    Kafka:Security:*                        shared security
    Kafka:Security:<conn>:*                 per-connection security
    Kafka:Producer:Config:*                 shared producer tuning
    Kafka:Producer:<conn>:Config:*          per-connection producer tuning
    Kafka:Consumer:Config:*                 shared consumer tuning
    Kafka:Consumer:<conn>:Config:*          per-connection consumer tuning
    Kafka:ClientId                          client id override

Binding Rules:
    - Absent or blank keys leave the model default untouched.
    - Present keys are parsed to the field type and assigned. Booleans
      accept true/false/1/0/yes/no/on/off, enums match names or values
      ignoring case, underscores and hyphens (``SaslSsl`` == ``SASL_SSL``).
    - A value that cannot be parsed raises ``ConfigurationParseError``
      naming the full key. Nothing is silently defaulted.

Security settings are bound once onto a shared ``ModelKafkaSecurityConfig``
and copied into the producer and consumer models.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from functools import partial
from typing import Final, TypeVar

from pydantic import BaseModel, ValidationError

from messaging_kafka.configuration.configuration_tree import (
    ConfigurationTree,
    ConfigValue,
    join_key,
)
from messaging_kafka.configuration.models import (
    ModelKafkaConsumerConfig,
    ModelKafkaProducerConfig,
    ModelKafkaSecurityConfig,
)
from messaging_kafka.enums import (
    EnumAutoOffsetReset,
    EnumInfraTransportType,
    EnumKafkaAcks,
    EnumSaslMechanism,
    EnumSecurityProtocol,
)
from messaging_kafka.errors import ConfigurationParseError, ModelInfraErrorContext
from messaging_kafka.utils import describe_enum_choices, match_enum_member

logger = logging.getLogger(__name__)

DEFAULT_PLATFORM_ROOT: Final[str] = "Kafka"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})

# Leaves whose raw values must never appear in errors or logs.
_SECRET_LEAVES: Final[frozenset[str]] = frozenset({"SaslPassword"})

ModelT = TypeVar("ModelT", bound=BaseModel)
Parser = Callable[[ConfigValue, str], object]


# =============================================================================
# Value Parsers
# =============================================================================


def _parse_context(config_key: str) -> ModelInfraErrorContext:
    return ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.CONFIGURATION,
        operation="bind_transport_config",
        target_name=config_key,
    )


def parse_bool(value: ConfigValue, config_key: str) -> bool:
    """Parse a boolean configuration value.

    Raises:
        ConfigurationParseError: If the value is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationParseError(
        config_key,
        "a boolean (true/false, 1/0, yes/no, on/off)",
        value=value,
        context=_parse_context(config_key),
    )


def parse_int(value: ConfigValue, config_key: str) -> int:
    """Parse an integer configuration value.

    YAML booleans are rejected even though ``bool`` subclasses ``int``.

    Raises:
        ConfigurationParseError: If the value is not an integer.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ConfigurationParseError(
        config_key,
        "an integer",
        value=value,
        context=_parse_context(config_key),
    )


def parse_str(value: ConfigValue, config_key: str) -> str:
    """Parse a string configuration value; non-strings are stringified."""
    return str(value).strip()


def parse_enum(enum_cls: type[Enum], value: ConfigValue, config_key: str) -> Enum:
    """Parse an enum configuration value by member name or value.

    Raises:
        ConfigurationParseError: Listing the accepted names.
    """
    member = None if isinstance(value, bool) else match_enum_member(enum_cls, str(value))
    if member is None:
        raise ConfigurationParseError(
            config_key,
            f"one of: {describe_enum_choices(enum_cls)}",
            value=value,
            context=_parse_context(config_key),
        )
    return member


# =============================================================================
# Leaf Tables (configuration leaf -> (model field, parser))
# =============================================================================

_SECURITY_LEAVES: Final[dict[str, tuple[str, Parser]]] = {
    "SecurityProtocol": ("security_protocol", partial(parse_enum, EnumSecurityProtocol)),
    "SaslMechanism": ("sasl_mechanism", partial(parse_enum, EnumSaslMechanism)),
    "SaslUsername": ("sasl_username", parse_str),
    "SaslPassword": ("sasl_password", parse_str),
    "SslCaLocation": ("ssl_ca_location", parse_str),
    "SslCertificateLocation": ("ssl_certificate_location", parse_str),
    "SslKeyLocation": ("ssl_key_location", parse_str),
}

_PRODUCER_LEAVES: Final[dict[str, tuple[str, Parser]]] = {
    "EnableIdempotence": ("enable_idempotence", parse_bool),
    "MaxInFlight": ("max_in_flight", parse_int),
    "Acks": ("acks", partial(parse_enum, EnumKafkaAcks)),
    "MessageSendMaxRetries": ("message_send_max_retries", parse_int),
}

_CONSUMER_LEAVES: Final[dict[str, tuple[str, Parser]]] = {
    "SessionTimeoutMs": ("session_timeout_ms", parse_int),
    "HeartbeatIntervalMs": ("heartbeat_interval_ms", parse_int),
    "MaxPollIntervalMs": ("max_poll_interval_ms", parse_int),
    "FetchMinBytes": ("fetch_min_bytes", parse_int),
    "AutoOffsetReset": ("auto_offset_reset", partial(parse_enum, EnumAutoOffsetReset)),
    "EnableAutoCommit": ("enable_auto_commit", parse_bool),
    "GroupId": ("group_id", parse_str),
}


def _apply_section(
    tree: ConfigurationTree,
    section: str,
    leaves: Mapping[str, tuple[str, Parser]],
    target: BaseModel,
) -> int:
    """Assign every present leaf under ``section`` onto ``target``."""
    applied = 0
    for leaf, (field_name, parser) in leaves.items():
        config_key = join_key(section, leaf)
        raw = tree.get(config_key)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue
        secret = leaf in _SECRET_LEAVES
        value = parser(raw, config_key)
        try:
            setattr(target, field_name, value)
        except ValidationError as e:
            raise ConfigurationParseError(
                config_key,
                f"a valid value for '{field_name}': {e.errors()[0]['msg']}",
                value=None if secret else raw,
                context=_parse_context(config_key),
            ) from e
        applied += 1
        logger.debug(
            "Bound configuration value",
            extra={"config_key": config_key, "field": field_name},
        )
    return applied


# =============================================================================
# Binding Entry Points
# =============================================================================


def bind_security_config(
    tree: ConfigurationTree,
    connection_name: str,
    target: ModelKafkaSecurityConfig,
    platform_root: str = DEFAULT_PLATFORM_ROOT,
) -> ModelKafkaSecurityConfig:
    """Bind ``<root>:Security`` then ``<root>:Security:<conn>`` onto ``target``.

    Also applies ``<root>:ClientId`` when present.

    Returns:
        ``target``, mutated in place.
    """
    client_id = tree.get_string(join_key(platform_root, "ClientId"))
    if client_id is not None:
        target.client_id = client_id
    shared = join_key(platform_root, "Security")
    _apply_section(tree, shared, _SECURITY_LEAVES, target)
    _apply_section(tree, join_key(shared, connection_name), _SECURITY_LEAVES, target)
    return target


def bind_producer_config(
    tree: ConfigurationTree,
    connection_name: str,
    target: ModelKafkaProducerConfig,
    platform_root: str = DEFAULT_PLATFORM_ROOT,
) -> ModelKafkaProducerConfig:
    """Bind producer tuning (shared then per-connection) onto ``target``."""
    section = join_key(platform_root, "Producer")
    _apply_section(tree, join_key(section, "Config"), _PRODUCER_LEAVES, target)
    _apply_section(
        tree, join_key(section, connection_name, "Config"), _PRODUCER_LEAVES, target
    )
    return target


def bind_consumer_config(
    tree: ConfigurationTree,
    connection_name: str,
    target: ModelKafkaConsumerConfig,
    platform_root: str = DEFAULT_PLATFORM_ROOT,
) -> ModelKafkaConsumerConfig:
    """Bind consumer tuning (shared then per-connection) onto ``target``."""
    section = join_key(platform_root, "Consumer")
    _apply_section(tree, join_key(section, "Config"), _CONSUMER_LEAVES, target)
    _apply_section(
        tree, join_key(section, connection_name, "Config"), _CONSUMER_LEAVES, target
    )
    return target


def _specialize(security: ModelKafkaSecurityConfig, model_cls: type[ModelT]) -> ModelT:
    return model_cls(**dict(security))


def bind_transport_configs(
    tree: ConfigurationTree,
    connection_name: str,
    bootstrap_servers: str,
    *,
    platform_root: str = DEFAULT_PLATFORM_ROOT,
    client_id: str | None = None,
    group_id: str | None = None,
) -> tuple[ModelKafkaProducerConfig, ModelKafkaConsumerConfig]:
    """Build producer and consumer settings for one named connection.

    Args:
        tree: Configuration tree.
        connection_name: Connection name (``"Messaging"``).
        bootstrap_servers: Resolved, non-empty bootstrap servers.
        platform_root: Section holding transport settings.
        client_id: Default client id, overridable by ``<root>:ClientId``.
        group_id: Default consumer group id, overridable by ``GroupId``.

    Returns:
        ``(producer_config, consumer_config)``.

    Raises:
        ConfigurationParseError: If any present value is malformed.
    """
    security = ModelKafkaSecurityConfig(
        bootstrap_servers=bootstrap_servers,
        client_id=client_id,
    )
    bind_security_config(tree, connection_name, security, platform_root)

    producer = bind_producer_config(
        tree,
        connection_name,
        _specialize(security, ModelKafkaProducerConfig),
        platform_root,
    )
    consumer = _specialize(security, ModelKafkaConsumerConfig)
    consumer.group_id = group_id
    bind_consumer_config(tree, connection_name, consumer, platform_root)

    logger.info(
        "Bound Kafka transport configuration for connection '%s'",
        connection_name,
        extra={
            "connection_name": connection_name,
            "platform_root": platform_root,
            "security_protocol": security.security_protocol.value,
            "sasl_mechanism": (
                security.sasl_mechanism.value if security.sasl_mechanism else None
            ),
        },
    )
    return producer, consumer


__all__: list[str] = [
    "DEFAULT_PLATFORM_ROOT",
    "bind_consumer_config",
    "bind_producer_config",
    "bind_security_config",
    "bind_transport_configs",
    "parse_bool",
    "parse_enum",
    "parse_int",
    "parse_str",
]
