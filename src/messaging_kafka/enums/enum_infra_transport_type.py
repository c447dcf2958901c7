# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Transport Type Enumeration.

Defines the transport types referenced in error context so that failures
raised while wiring the messaging layer can be attributed to the component
that produced them.
"""

from enum import Enum


class EnumInfraTransportType(str, Enum):
    """Transport types used in messaging error context.

    Attributes:
        KAFKA: Kafka message broker transport
        CONFIGURATION: Hierarchical configuration tree (files, env vars)
        RUNTIME: Startup wiring performed inside the host process
    """

    KAFKA = "kafka"
    CONFIGURATION = "configuration"
    RUNTIME = "runtime"


__all__ = ["EnumInfraTransportType"]
