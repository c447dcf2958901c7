# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Messaging Errors Module.

Exports:
    ModelInfraErrorContext: Configuration model for bundled error context
    RuntimeHostError: Base messaging error class
    ProtocolConfigurationError: Configuration validation errors
    MissingConnectionStringError: Fatal missing bootstrap connection string
    ConfigurationParseError: Malformed typed configuration value
    TopicDeclarationError: Malformed topic declaration on a message type

Error Sanitization Guidelines:
    NEVER include in error messages or context:
        - SASL passwords or other secrets
        - Full connection strings with credentials

    SAFE to include:
        - Configuration keys (e.g., "Kafka:Security:SecurityProtocol")
        - Connection names (e.g., "Messaging")
        - Message type names
        - Correlation IDs
"""

from messaging_kafka.errors.infra_errors import (
    ConfigurationParseError,
    MissingConnectionStringError,
    ProtocolConfigurationError,
    RuntimeHostError,
    TopicDeclarationError,
)
from messaging_kafka.errors.model_infra_error_context import ModelInfraErrorContext

__all__: list[str] = [
    # Configuration model
    "ModelInfraErrorContext",
    # Error classes
    "RuntimeHostError",
    "ProtocolConfigurationError",
    "MissingConnectionStringError",
    "ConfigurationParseError",
    "TopicDeclarationError",
]
