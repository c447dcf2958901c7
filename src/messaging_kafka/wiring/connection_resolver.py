# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Startup decisions for a Kafka connection.

Resolves which connection string to use, the consumer group and client
identities, and whether topics should be auto-provisioned.

Configuration Keys:
    ConnectionStrings:<conn>       Bootstrap servers (required)
    Kafka:ConnectionStringName     Connection name override (default "Messaging")
    Kafka:AutoProvision            Explicit auto-provisioning switch
"""

from __future__ import annotations

import logging
import re
from typing import Final

from messaging_kafka.configuration import (
    CONNECTION_STRINGS_SECTION,
    ConfigurationTree,
    join_key,
    parse_bool,
)
from messaging_kafka.enums import EnumInfraTransportType
from messaging_kafka.errors import (
    MissingConnectionStringError,
    ModelInfraErrorContext,
    ProtocolConfigurationError,
)

logger = logging.getLogger(__name__)

DEFAULT_CONNECTION_NAME: Final[str] = "Messaging"
CONNECTION_NAME_KEY: Final[str] = "Kafka:ConnectionStringName"
AUTO_PROVISION_KEY: Final[str] = "Kafka:AutoProvision"

# Environment prefixes where topics are created on demand by default.
AUTO_PROVISION_PREFIXES: Final[frozenset[str]] = frozenset({"dev", "local"})

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]+")


def resolve_connection_name(
    tree: ConfigurationTree,
    default: str = DEFAULT_CONNECTION_NAME,
) -> str:
    """Return the connection name, honouring ``Kafka:ConnectionStringName``."""
    configured = tree.get_string(CONNECTION_NAME_KEY)
    if configured is None:
        logger.info(
            "No %s configured, using connection name '%s'",
            CONNECTION_NAME_KEY,
            default,
            extra={"connection_name": default},
        )
        return default
    return configured


def resolve_bootstrap_servers(tree: ConfigurationTree, connection_name: str) -> str:
    """Return the bootstrap servers for ``connection_name``.

    Raises:
        MissingConnectionStringError: If ``ConnectionStrings:<conn>`` is
            absent or blank. The process must not start.
    """
    bootstrap_servers = tree.get_connection_string(connection_name)
    if bootstrap_servers is None:
        config_key = join_key(CONNECTION_STRINGS_SECTION, connection_name)
        raise MissingConnectionStringError(
            connection_name,
            config_key,
            context=ModelInfraErrorContext.with_correlation(
                transport_type=EnumInfraTransportType.CONFIGURATION,
                operation="resolve_bootstrap_servers",
                target_name=config_key,
            ),
        )
    return bootstrap_servers


def build_consumer_group_id(service_name: str, environment_prefix: str) -> str:
    """Return ``<service>-<env-prefix>``, isolating groups per environment.

    Raises:
        ProtocolConfigurationError: If the service name is blank.
    """
    service_name = service_name.strip()
    if not service_name:
        raise ProtocolConfigurationError(
            "Service name is required to build the consumer group id",
            context=ModelInfraErrorContext.with_correlation(
                transport_type=EnumInfraTransportType.CONFIGURATION,
                operation="build_consumer_group_id",
            ),
        )
    return f"{service_name}-{environment_prefix}"


def build_client_id(application_name: str) -> str:
    """Kebab-case an application name into a Kafka client id.

    Example:
        >>> build_client_id("Orders.Api")
        'orders-api'
        >>> build_client_id("OrderProcessingService")
        'order-processing-service'

    Raises:
        ProtocolConfigurationError: If nothing usable remains.
    """
    kebab = _ACRONYM_BOUNDARY_RE.sub(r"\1-\2", application_name)
    kebab = _CAMEL_BOUNDARY_RE.sub(r"\1-\2", kebab)
    kebab = _NON_ALNUM_RE.sub("-", kebab).strip("-").lower()
    if not kebab:
        raise ProtocolConfigurationError(
            f"Cannot derive a client id from application name {application_name!r}",
            context=ModelInfraErrorContext.with_correlation(
                transport_type=EnumInfraTransportType.CONFIGURATION,
                operation="build_client_id",
            ),
        )
    return kebab


def resolve_auto_provision(tree: ConfigurationTree, environment_prefix: str) -> bool:
    """Decide whether missing topics should be created on demand.

    An explicit ``Kafka:AutoProvision`` always wins. Otherwise provisioning
    is on for development-like environments only.

    Raises:
        ConfigurationParseError: If the explicit flag is not a boolean.
    """
    explicit = tree.get(AUTO_PROVISION_KEY)
    if explicit is not None and not (isinstance(explicit, str) and not explicit.strip()):
        return parse_bool(explicit, AUTO_PROVISION_KEY)

    enabled = environment_prefix in AUTO_PROVISION_PREFIXES
    logger.info(
        "No %s configured, auto-provisioning %s for environment prefix '%s'",
        AUTO_PROVISION_KEY,
        "enabled" if enabled else "disabled",
        environment_prefix,
        extra={"auto_provision": enabled, "environment_prefix": environment_prefix},
    )
    return enabled


__all__: list[str] = [
    "AUTO_PROVISION_KEY",
    "AUTO_PROVISION_PREFIXES",
    "CONNECTION_NAME_KEY",
    "DEFAULT_CONNECTION_NAME",
    "build_client_id",
    "build_consumer_group_id",
    "resolve_auto_provision",
    "resolve_bootstrap_servers",
    "resolve_connection_name",
]
