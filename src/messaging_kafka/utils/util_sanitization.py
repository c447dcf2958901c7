# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Helpers that strip credentials before values reach logs or errors."""

from __future__ import annotations


def sanitize_bootstrap_servers(servers: str) -> str:
    """Sanitize a bootstrap servers string to remove potential credentials.

    Args:
        servers: Raw bootstrap servers string (may contain credentials)

    Returns:
        Sanitized servers string safe for logging and error messages

    Example:
        "user:pass@kafka:9092" -> "kafka:9092"
        "kafka:9092,kafka2:9092" -> "kafka:9092,kafka2:9092"
    """
    if not servers:
        return "unknown"

    sanitized = []
    for server in (s.strip() for s in servers.split(",")):
        if "@" in server:
            server = server.split("@", 1)[1]
        sanitized.append(server)

    return ",".join(sanitized)


__all__ = ["sanitize_bootstrap_servers"]
