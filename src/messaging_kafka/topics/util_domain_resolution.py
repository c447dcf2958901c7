# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Domain segment resolution for topic names.

Precedence:
    1. ``domain`` on the message type's topic declaration (if non-blank)
    2. The package-level default domain (if declared and non-blank)
    3. The first segment of the owning module name, lowercased
       (``sales.contracts.events`` -> ``sales``)

The last step always produces a value, so every message type resolves to a
domain without mandatory per-type annotation.
"""

from __future__ import annotations

from messaging_kafka.enums import EnumInfraTransportType
from messaging_kafka.errors import ModelInfraErrorContext, TopicDeclarationError


def resolve_domain(
    explicit_domain: str | None,
    module_default: str | None,
    module_name: str,
) -> str:
    """Resolve the domain segment for a message type.

    Args:
        explicit_domain: Domain from the topic declaration.
        module_default: Package-level default domain.
        module_name: Full name of the module that owns the message type.

    Returns:
        The explicit domain verbatim, the module default, or the lowercased
        first segment of ``module_name``.

    Raises:
        TopicDeclarationError: If every source is empty.
    """
    if explicit_domain and explicit_domain.strip():
        return explicit_domain
    if module_default and module_default.strip():
        return module_default

    first_segment = module_name.split(".", 1)[0].strip()
    if not first_segment:
        raise TopicDeclarationError(
            f"Cannot derive a domain from module name '{module_name}'",
            context=ModelInfraErrorContext.with_correlation(
                transport_type=EnumInfraTransportType.KAFKA,
                operation="resolve_domain",
                target_name=module_name,
            ),
        )
    return first_segment.lower()


__all__: list[str] = ["resolve_domain"]
