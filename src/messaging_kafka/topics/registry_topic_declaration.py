# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Attach, look up and validate topic declarations on message types.

Message authors declare topics with the ``event_topic`` class decorator::

    @event_topic("customer", domain="sales", pluralize=True)
    class CustomerCreated(BaseModel):
        customer_id: UUID

Packages may declare a default domain for every message type they own,
either with a module attribute in the package ``__init__.py``::

    __default_domain__ = "sales"

or explicitly at startup::

    register_default_domain("sales_contracts", "sales")

Thread Safety:
    Lookups are memoized in plain dicts populated with ``setdefault``.
    Two threads computing the same entry concurrently store the same value,
    so no lock is needed. Registration happens at import time, under the
    interpreter's import lock.
"""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Callable, Iterable
from typing import Final, TypeVar

from messaging_kafka.enums import EnumInfraTransportType, EnumTopicScope
from messaging_kafka.errors import ModelInfraErrorContext, TopicDeclarationError
from messaging_kafka.topics.model_topic_declaration import (
    DEFAULT_TOPIC_VERSION,
    ModelDefaultDomainDeclaration,
    ModelTopicDeclaration,
)
from messaging_kafka.utils import MAX_TOPIC_LENGTH

logger = logging.getLogger(__name__)

TOPIC_DECLARATION_ATTRIBUTE: Final[str] = "__event_topic__"
DEFAULT_DOMAIN_ATTRIBUTE: Final[str] = "__default_domain__"

# A single topic segment: no periods, Kafka-legal characters only.
_SEGMENT_RE = re.compile(r"^[a-zA-Z0-9_-]+$")

T = TypeVar("T", bound=type)

_registered_types: dict[type, None] = {}
_declaration_cache: dict[type, ModelTopicDeclaration | None] = {}
_default_domains: dict[str, ModelDefaultDomainDeclaration] = {}


def qualified_type_name(message_type: type) -> str:
    """Return ``module.QualName`` for error messages and logs."""
    return f"{message_type.__module__}.{message_type.__qualname__}"


def event_topic(
    topic: str,
    *,
    domain: str | None = None,
    version: str = DEFAULT_TOPIC_VERSION,
    internal: bool = False,
    pluralize: bool = False,
) -> Callable[[T], T]:
    """Class decorator declaring the topic a message type is published to.

    The declaration is validated immediately so authoring mistakes fail at
    import time rather than on first publish.

    Args:
        topic: Topic slug.
        domain: Domain segment override.
        version: Version segment; empty string omits it.
        internal: Domain-private scope instead of public.
        pluralize: Append ``"s"`` to the slug.

    Returns:
        Decorator registering the class and returning it unchanged.

    Raises:
        TopicDeclarationError: If the declaration is malformed.
    """
    declaration = ModelTopicDeclaration(
        topic=topic,
        domain=domain,
        version=version,
        internal=internal,
        pluralize=pluralize,
    )

    def decorator(message_type: T) -> T:
        validate_topic_declaration(message_type, declaration)
        setattr(message_type, TOPIC_DECLARATION_ATTRIBUTE, declaration)
        _declaration_cache.pop(message_type, None)
        _registered_types[message_type] = None
        return message_type

    return decorator


def get_topic_declaration(message_type: type) -> ModelTopicDeclaration | None:
    """Return the topic declaration of ``message_type``, or ``None``.

    Declarations are inherited by subclasses. Results are memoized per type.

    Raises:
        TopicDeclarationError: If the declaration attribute holds something
            other than a ``ModelTopicDeclaration``.
    """
    try:
        return _declaration_cache[message_type]
    except KeyError:
        pass

    declaration = getattr(message_type, TOPIC_DECLARATION_ATTRIBUTE, None)
    if declaration is not None and not isinstance(declaration, ModelTopicDeclaration):
        raise TopicDeclarationError(
            f"{qualified_type_name(message_type)}.{TOPIC_DECLARATION_ATTRIBUTE} must be "
            f"a ModelTopicDeclaration, got {type(declaration).__name__}",
            message_types=(qualified_type_name(message_type),),
            context=_declaration_context(message_type),
        )
    return _declaration_cache.setdefault(message_type, declaration)


def registered_message_types() -> tuple[type, ...]:
    """Return every type decorated with ``event_topic``, in definition order."""
    return tuple(_registered_types)


def default_domain(domain: str, *, package: str = "") -> ModelDefaultDomainDeclaration:
    """Build a validated default-domain declaration.

    Intended for a package ``__init__.py``::

        __default_domain__ = default_domain("sales")

    Raises:
        TopicDeclarationError: If the domain is blank or contains a period.
    """
    if not domain.strip() or not _SEGMENT_RE.match(domain):
        raise TopicDeclarationError(
            f"Default domain {domain!r} for package '{package or '<unknown>'}' must be "
            "a single non-empty topic segment",
            context=ModelInfraErrorContext.with_correlation(
                transport_type=EnumInfraTransportType.KAFKA,
                operation="default_domain",
                target_name=package or None,
            ),
        )
    return ModelDefaultDomainDeclaration(domain=domain)


def register_default_domain(package: str, domain: str) -> None:
    """Declare the default domain for every message type under ``package``.

    Args:
        package: Module or package name (``"sales_contracts"``).
        domain: Default domain segment.

    Raises:
        TopicDeclarationError: If the domain is blank or contains a period.
    """
    _default_domains[package] = default_domain(domain, package=package)
    logger.debug(
        "Registered default domain",
        extra={"package": package, "domain": domain},
    )


def get_default_domain(module_name: str) -> str | None:
    """Return the default domain for ``module_name``, if any is declared.

    Walks from the most specific module to the top-level package
    (``a.b.c``, ``a.b``, ``a``). At each level an explicit
    ``register_default_domain`` entry wins over a ``__default_domain__``
    module attribute.

    Raises:
        TopicDeclarationError: If a ``__default_domain__`` attribute is not a
            single topic segment.
    """
    parts = module_name.split(".")
    for end in range(len(parts), 0, -1):
        candidate = ".".join(parts[:end])
        registered = _default_domains.get(candidate)
        if registered is not None:
            return registered.domain
        module = sys.modules.get(candidate)
        declared = getattr(module, DEFAULT_DOMAIN_ATTRIBUTE, None)
        if isinstance(declared, ModelDefaultDomainDeclaration):
            declared = declared.domain
        if isinstance(declared, str) and declared.strip():
            return default_domain(declared, package=candidate).domain
    return None


def validate_topic_declaration(
    message_type: type,
    declaration: ModelTopicDeclaration,
) -> None:
    """Validate one declaration, raising on the first problem.

    A declaration is valid when the slug is non-blank and the slug, domain
    and version each form a single Kafka-legal topic segment. Segments must
    not contain periods, so a generated name always splits back into its
    parts. The segments the declaration fixes must also fit within
    ``MAX_TOPIC_LENGTH``.

    Raises:
        TopicDeclarationError: Naming the message type and the bad field.
    """
    problem = _find_declaration_problem(declaration)
    if problem is not None:
        type_name = qualified_type_name(message_type)
        raise TopicDeclarationError(
            f"Invalid topic declaration on {type_name}: {problem}",
            message_types=(type_name,),
            context=_declaration_context(message_type),
        )


def validate_topic_declarations(message_types: Iterable[type]) -> int:
    """Startup validation pass over message types.

    Every type is checked; all failures are reported together. Types
    without a declaration are ignored here. Types that rely on a package
    default domain have that default checked as well.

    Args:
        message_types: Message types to validate.

    Returns:
        Number of declarations validated.

    Raises:
        TopicDeclarationError: Listing every offending type.
    """
    failures: list[tuple[str, str]] = []
    checked = 0
    for message_type in message_types:
        declaration = get_topic_declaration(message_type)
        if declaration is None:
            continue
        checked += 1
        problem = _find_declaration_problem(declaration)
        if problem is None and not (declaration.domain and declaration.domain.strip()):
            try:
                get_default_domain(message_type.__module__)
            except TopicDeclarationError as e:
                problem = e.message
        if problem is not None:
            failures.append((qualified_type_name(message_type), problem))

    if failures:
        details = "; ".join(f"{name}: {problem}" for name, problem in failures)
        raise TopicDeclarationError(
            f"{len(failures)} message type(s) have invalid topic declarations: {details}",
            message_types=tuple(name for name, _ in failures),
            context=ModelInfraErrorContext.with_correlation(
                transport_type=EnumInfraTransportType.KAFKA,
                operation="validate_topic_declarations",
            ),
        )
    return checked


def _find_declaration_problem(declaration: ModelTopicDeclaration) -> str | None:
    if not declaration.topic.strip():
        return "topic slug must not be empty"
    if not _SEGMENT_RE.match(declaration.topic):
        return (
            f"topic slug {declaration.topic!r} must contain only letters, digits, "
            "'_' or '-' (no periods)"
        )
    if declaration.domain and declaration.domain.strip():
        if not _SEGMENT_RE.match(declaration.domain):
            return (
                f"domain {declaration.domain!r} must contain only letters, digits, "
                "'_' or '-' (no periods)"
            )
    if declaration.version and not _SEGMENT_RE.match(declaration.version):
        return (
            f"version {declaration.version!r} must contain only letters, digits, "
            "'_' or '-' (no periods)"
        )
    declared_length = _declared_segments_length(declaration)
    if declared_length > MAX_TOPIC_LENGTH:
        return (
            f"domain, scope, slug and version span {declared_length} characters; "
            f"topic names are limited to {MAX_TOPIC_LENGTH}"
        )
    return None


def _declared_segments_length(declaration: ModelTopicDeclaration) -> int:
    # Environment prefix and an inherited domain are unknown until wiring.
    segments = [
        EnumTopicScope.from_internal_flag(declaration.internal).value,
        f"{declaration.topic}s" if declaration.pluralize else declaration.topic,
    ]
    if declaration.domain and declaration.domain.strip():
        segments.insert(0, declaration.domain)
    if declaration.version:
        segments.append(declaration.version)
    return len(".".join(segments))


def _declaration_context(message_type: type) -> ModelInfraErrorContext:
    return ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.KAFKA,
        operation="validate_topic_declaration",
        target_name=qualified_type_name(message_type),
    )


__all__: list[str] = [
    "DEFAULT_DOMAIN_ATTRIBUTE",
    "TOPIC_DECLARATION_ATTRIBUTE",
    "default_domain",
    "event_topic",
    "get_default_domain",
    "get_topic_declaration",
    "qualified_type_name",
    "register_default_domain",
    "registered_message_types",
    "validate_topic_declaration",
    "validate_topic_declarations",
]
