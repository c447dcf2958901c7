# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Case-insensitive enum member matching for configuration values.

Configuration authors write enum values in whatever casing the surrounding
tooling uses: ``SaslSsl``, ``SASL_SSL``, ``sasl-ssl`` and ``sasl_ssl`` all
name the same security protocol. Matching ignores case, underscores and
hyphens, and accepts either the member name or its value.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

EnumT = TypeVar("EnumT", bound=Enum)


def _normalize(raw: str) -> str:
    return raw.strip().replace("_", "").replace("-", "").lower()


def match_enum_member(enum_cls: type[EnumT], raw: str) -> EnumT | None:
    """Find the member of ``enum_cls`` named or valued ``raw``.

    Args:
        enum_cls: Enum class to search.
        raw: Configuration value.

    Returns:
        The matching member, or ``None`` when nothing matches.

    Example:
        >>> match_enum_member(EnumSecurityProtocol, "SaslSsl")
        <EnumSecurityProtocol.SASL_SSL: 'SASL_SSL'>
    """
    exact = raw.strip().lower()
    wanted = _normalize(raw)
    if not wanted:
        return None
    for member in enum_cls:
        if _normalize(member.name) == wanted:
            return member
    # Exact values first: "-1" must not collapse onto "1".
    for member in enum_cls:
        if str(member.value).lower() == exact:
            return member
    for member in enum_cls:
        if _normalize(str(member.value)) == wanted:
            return member
    return None


def describe_enum_choices(enum_cls: type[Enum]) -> str:
    """Render the accepted names of ``enum_cls`` for error messages."""
    return ", ".join(member.name for member in enum_cls)


__all__ = ["describe_enum_choices", "match_enum_member"]
