# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Environment name to topic namespace prefix mapping.

Topics are namespaced per deployment environment so that producers and
consumers of the same logical stream in different environments never share
a topic, even on a shared cluster.

Mapping (case-insensitive on the environment name):
    Development -> dev
    Production  -> prod
    Test        -> test
    Staging     -> staging

Any other name falls back to the lowercased full environment name.
"""

from __future__ import annotations

from typing import Final

ENVIRONMENT_PREFIXES: Final[dict[str, str]] = {
    "development": "dev",
    "production": "prod",
    "test": "test",
    "staging": "staging",
}


def resolve_environment_prefix(environment_name: str) -> str:
    """Map a runtime environment name to its topic namespace prefix.

    Args:
        environment_name: Host environment name (e.g. ``"Development"``).

    Returns:
        Short prefix for known environments, otherwise the lowercased name.

    Example:
        >>> resolve_environment_prefix("Development")
        'dev'
        >>> resolve_environment_prefix("QA")
        'qa'
    """
    lowered = environment_name.strip().lower()
    return ENVIRONMENT_PREFIXES.get(lowered, lowered)


__all__: list[str] = ["ENVIRONMENT_PREFIXES", "resolve_environment_prefix"]
