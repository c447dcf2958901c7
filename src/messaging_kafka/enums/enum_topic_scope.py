# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topic scope enumeration.

The scope segment of a topic name tells consumers whether a stream is part
of a service's public contract or an implementation detail shared only by
the owning domain's own services.
"""

from __future__ import annotations

from enum import StrEnum


class EnumTopicScope(StrEnum):
    """Scope segment of a generated topic name.

    Attributes:
        PUBLIC: Integration events other domains may subscribe to
        INTERNAL: Events private to the owning domain
    """

    PUBLIC = "public"
    INTERNAL = "internal"

    @classmethod
    def from_internal_flag(cls, internal: bool) -> EnumTopicScope:
        """Map a declaration's ``internal`` flag to a scope."""
        return cls.INTERNAL if internal else cls.PUBLIC


__all__: list[str] = ["EnumTopicScope"]
