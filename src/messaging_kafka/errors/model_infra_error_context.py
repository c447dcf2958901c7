# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Infrastructure Error Context Configuration Model.

This module defines the configuration model for infrastructure error context,
encapsulating common structured fields to reduce __init__ parameter count
while keeping them strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from messaging_kafka.enums import EnumInfraTransportType


class ModelInfraErrorContext(BaseModel):
    """Configuration model for infrastructure error context.

    Attributes:
        transport_type: Component the failure originated in (KAFKA, CONFIGURATION, ...)
        operation: Operation being performed (resolve_connection, bind_config, ...)
        target_name: Offending resource, configuration key or message type
        correlation_id: Correlation ID for tracing startup failures

    Example:
        >>> context = ModelInfraErrorContext(
        ...     transport_type=EnumInfraTransportType.CONFIGURATION,
        ...     operation="resolve_connection",
        ...     target_name="ConnectionStrings:Messaging",
        ... )
        >>> raise ProtocolConfigurationError("Missing connection", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: EnumInfraTransportType | None = Field(
        default=None,
        description="Component the failure originated in",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Offending resource, configuration key or message type",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelInfraErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to propagate.
            **kwargs: Remaining context fields.

        Returns:
            Context whose ``correlation_id`` is always set.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelInfraErrorContext"]
