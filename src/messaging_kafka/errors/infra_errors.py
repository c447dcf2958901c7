# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Messaging Infrastructure Error Classes.

Error Hierarchy:
    RuntimeHostError (base messaging error)
    └── ProtocolConfigurationError
        ├── MissingConnectionStringError
        ├── ConfigurationParseError
        └── TopicDeclarationError

All errors:
    - Support proper error chaining with ``raise ... from e``
    - Include structured context for debugging
    - Carry a correlation ID when one is supplied through the context
    - Name the offending configuration key or message type in the message,
      so operators can fix configuration without reading source
"""

from __future__ import annotations

from uuid import UUID

from messaging_kafka.errors.model_infra_error_context import ModelInfraErrorContext


class RuntimeHostError(Exception):
    """Base error class for messaging infrastructure errors.

    Structured Fields (via ModelInfraErrorContext):
        transport_type: Component the failure originated in
        operation: Operation being performed
        correlation_id: Correlation ID for tracing
        target_name: Offending key, resource or message type

    Example:
        >>> context = ModelInfraErrorContext(
        ...     operation="bind_config",
        ...     target_name="Kafka:Security:SecurityProtocol",
        ... )
        >>> raise RuntimeHostError("Binding failed", context=context, value_kind="str")
    """

    def __init__(
        self,
        message: str,
        context: ModelInfraErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize RuntimeHostError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled infrastructure context
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.extra_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.transport_type is not None:
                self.extra_context["transport_type"] = context.transport_type
            if context.operation is not None:
                self.extra_context["operation"] = context.operation
            if context.target_name is not None:
                self.extra_context["target_name"] = context.target_name

    @property
    def correlation_id(self) -> UUID | None:
        """Correlation ID carried by the context, if any."""
        if self.context is None:
            return None
        return self.context.correlation_id

    def __str__(self) -> str:
        return self.message


class ProtocolConfigurationError(RuntimeHostError):
    """Raised when messaging configuration validation fails.

    Used for configuration parsing errors, missing required fields,
    invalid configuration values, or authoring errors in message metadata.
    """


class MissingConnectionStringError(ProtocolConfigurationError):
    """Raised when the bootstrap connection string cannot be resolved.

    Fatal: the process must not start serving messages without a broker
    address.

    Attributes:
        connection_name: Connection name that was looked up.
        config_key: Full configuration key that was missing.
    """

    def __init__(
        self,
        connection_name: str,
        config_key: str,
        context: ModelInfraErrorContext | None = None,
    ) -> None:
        self.connection_name = connection_name
        self.config_key = config_key
        super().__init__(
            f"Kafka connection string '{connection_name}' not found in "
            f"configuration (expected key '{config_key}')",
            context=context,
            connection_name=connection_name,
            config_key=config_key,
        )


class ConfigurationParseError(ProtocolConfigurationError):
    """Raised when a typed configuration value cannot be parsed.

    The raw value is only included in the message for non-secret keys.

    Attributes:
        config_key: Full configuration key holding the bad value.
        expected: Human-readable description of the accepted values.
    """

    def __init__(
        self,
        config_key: str,
        expected: str,
        value: object | None = None,
        context: ModelInfraErrorContext | None = None,
    ) -> None:
        self.config_key = config_key
        self.expected = expected
        if value is None:
            message = f"Invalid value for configuration key '{config_key}'. Expected {expected}"
        else:
            message = (
                f"Invalid value {value!r} for configuration key '{config_key}'. "
                f"Expected {expected}"
            )
        super().__init__(
            message,
            context=context,
            config_key=config_key,
            expected=expected,
        )


class TopicDeclarationError(ProtocolConfigurationError):
    """Raised when a message type's topic declaration is malformed.

    Attributes:
        message_types: Qualified names of the offending message types.
    """

    def __init__(
        self,
        message: str,
        message_types: tuple[str, ...] = (),
        context: ModelInfraErrorContext | None = None,
    ) -> None:
        self.message_types = message_types
        super().__init__(message, context=context, message_types=message_types)


__all__ = [
    "ConfigurationParseError",
    "MissingConnectionStringError",
    "ProtocolConfigurationError",
    "RuntimeHostError",
    "TopicDeclarationError",
]
