# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Canonical topic name generator.

Formal Invariant:
    Topic names are a pure function of the message type's topic declaration,
    its package default domain, its owning module name and the environment
    name. Producers and consumers deployed independently compute identical
    names without coordinating.

Topic Format:
    <env-prefix>.<domain>.<scope>.<slug>[.<version>]

    Examples:
        dev.sales.public.customers.v1
        prod.billing.internal.invoice-paid.v2
        test.sales.public.order-created

Pluralization:
    When a declaration sets ``pluralize``, ``"s"`` is appended to the slug.
    Irregular plurals are not handled; authors who need one write the plural
    slug directly.

See Also:
    messaging_kafka.topics.util_environment_prefix - Environment prefixes
    messaging_kafka.topics.util_domain_resolution - Domain fallback chain
    messaging_kafka.topics.registry_topic_declaration - Declarations
"""

from __future__ import annotations

from messaging_kafka.enums import EnumInfraTransportType, EnumTopicScope
from messaging_kafka.errors import ModelInfraErrorContext, TopicDeclarationError
from messaging_kafka.topics.model_topic_declaration import ModelTopicDeclaration
from messaging_kafka.topics.registry_topic_declaration import (
    get_default_domain,
    get_topic_declaration,
    qualified_type_name,
)
from messaging_kafka.topics.util_domain_resolution import resolve_domain
from messaging_kafka.topics.util_environment_prefix import resolve_environment_prefix


def pluralize(slug: str) -> str:
    """Pluralize a topic slug by appending ``"s"``."""
    return f"{slug}s"


def build_topic_name(
    environment_name: str,
    declaration: ModelTopicDeclaration,
    module_name: str,
    module_default: str | None = None,
) -> str:
    """Combine environment, domain, scope, slug and version into a topic name.

    The slug is not validated here; declarations are validated when they are
    registered and again by the startup validation pass.

    Args:
        environment_name: Host environment name (``"Development"``).
        declaration: Topic declaration of the message type.
        module_name: Module owning the message type.
        module_default: Package-level default domain, if declared.

    Returns:
        Topic name, e.g. ``"dev.sales.public.customers.v1"``.
    """
    prefix = resolve_environment_prefix(environment_name)
    domain = resolve_domain(declaration.domain, module_default, module_name).lower()
    scope = EnumTopicScope.from_internal_flag(declaration.internal)
    slug = pluralize(declaration.topic) if declaration.pluralize else declaration.topic
    version_suffix = f".{declaration.version}" if declaration.version else ""
    return f"{prefix}.{domain}.{scope}.{slug}{version_suffix}"


def get_topic_name(
    message_type: type,
    declaration: ModelTopicDeclaration,
    env: str,
) -> str:
    """Resolve the wire topic for ``message_type`` in environment ``env``.

    This is the entry point the host message bus calls at publish and
    subscribe time.

    Args:
        message_type: Message class.
        declaration: Its topic declaration.
        env: Host environment name.

    Returns:
        Topic name.
    """
    module_name = message_type.__module__
    return build_topic_name(
        env,
        declaration,
        module_name,
        module_default=get_default_domain(module_name),
    )


class TopicNameGenerator:
    """Topic name generator bound to one environment.

    Registered with the host message bus by the Kafka wiring. Safe for
    concurrent use: it holds only the environment name fixed at startup.

    Args:
        environment_name: Host environment name.

    Example:
        >>> generator = TopicNameGenerator("Development")
        >>> generator.get_topic_name(CustomerCreated)
        'dev.sales.public.customers.v1'
    """

    def __init__(self, environment_name: str) -> None:
        self._environment_name = environment_name
        self._environment_prefix = resolve_environment_prefix(environment_name)

    @property
    def environment_name(self) -> str:
        """Host environment name the generator was built for."""
        return self._environment_name

    @property
    def environment_prefix(self) -> str:
        """Topic namespace prefix for the environment."""
        return self._environment_prefix

    def get_topic_name(
        self,
        message_type: type,
        declaration: ModelTopicDeclaration | None = None,
    ) -> str:
        """Resolve the topic name of ``message_type``.

        Args:
            message_type: Message class.
            declaration: Explicit declaration. Looked up on the type when
                omitted.

        Raises:
            TopicDeclarationError: If no declaration is given and the type
                has none.
        """
        if declaration is None:
            declaration = get_topic_declaration(message_type)
        if declaration is None:
            type_name = qualified_type_name(message_type)
            raise TopicDeclarationError(
                f"{type_name} has no topic declaration; decorate it with @event_topic",
                message_types=(type_name,),
                context=ModelInfraErrorContext.with_correlation(
                    transport_type=EnumInfraTransportType.KAFKA,
                    operation="get_topic_name",
                    target_name=type_name,
                ),
            )
        return get_topic_name(message_type, declaration, self._environment_name)

    def __repr__(self) -> str:
        return f"TopicNameGenerator(environment_name={self._environment_name!r})"


__all__: list[str] = [
    "TopicNameGenerator",
    "build_topic_name",
    "get_topic_name",
    "pluralize",
]
