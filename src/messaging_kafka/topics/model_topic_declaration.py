# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topic declaration models attached to message types.

A ``ModelTopicDeclaration`` is the constant, per-message-type metadata that
the topic name generator reads. It is created once when the message class is
defined (usually through the ``event_topic`` decorator) and never mutated,
so it can be cached for the lifetime of the process.

A ``ModelDefaultDomainDeclaration`` supplies the domain segment for every
message type in a package that does not name its own domain.

Related:
    - registry_topic_declaration.py: Attaches and looks up declarations
    - topic_name_generator.py: Turns declarations into topic names
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TOPIC_VERSION: str = "v1"


class ModelTopicDeclaration(BaseModel):
    """Per-message-type topic metadata.

    Attributes:
        topic: Topic slug, e.g. ``"customer"`` or ``"invoice-paid"``.
        domain: Domain segment override. When ``None`` or blank, the package
            default domain (or the first segment of the module name) is used.
        version: Version segment. An empty string omits the segment.
        internal: ``True`` for topics private to the owning domain.
        pluralize: Append ``"s"`` to the slug when building the topic name.

    Example:
        >>> declaration = ModelTopicDeclaration(topic="customer", domain="sales", pluralize=True)
        >>> declaration.version
        'v1'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    topic: str = Field(
        ...,
        description="Topic slug.",
    )
    domain: str | None = Field(
        default=None,
        description="Domain segment override.",
    )
    version: str = Field(
        default=DEFAULT_TOPIC_VERSION,
        description="Version segment; empty string omits it.",
    )
    internal: bool = Field(
        default=False,
        description="Internal (domain-private) scope instead of public.",
    )
    pluralize: bool = Field(
        default=False,
        description="Pluralize the slug when building the topic name.",
    )


class ModelDefaultDomainDeclaration(BaseModel):
    """Package-level default domain.

    Attributes:
        domain: Domain used by message types that omit their own.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    domain: str = Field(
        ...,
        description="Default domain for message types in the package.",
    )


__all__: list[str] = [
    "DEFAULT_TOPIC_VERSION",
    "ModelDefaultDomainDeclaration",
    "ModelTopicDeclaration",
]
