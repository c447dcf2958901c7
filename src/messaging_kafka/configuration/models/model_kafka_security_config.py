# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared Kafka connection and security settings.

Security Note:
    ``sasl_password`` uses SecretStr to prevent accidental logging of
    credentials. Passwords should come from environment variables or a
    secret store layered into the configuration tree, never from committed
    YAML files.
"""

from __future__ import annotations

import ssl

from aiokafka.helpers import create_ssl_context
from pydantic import BaseModel, ConfigDict, Field, SecretStr

from messaging_kafka.enums import EnumSaslMechanism, EnumSecurityProtocol

_TLS_PROTOCOLS = frozenset({EnumSecurityProtocol.SSL, EnumSecurityProtocol.SASL_SSL})


class ModelKafkaSecurityConfig(BaseModel):
    """Connection settings shared by producers and consumers.

    Instances are mutable so the configuration binder can layer values
    onto library defaults; assignments are validated.

    Attributes:
        bootstrap_servers: Comma-separated broker list (required, non-empty)
        client_id: Client identifier reported to brokers
        security_protocol: Transport security protocol (default PLAINTEXT)
        sasl_mechanism: SASL mechanism when a SASL protocol is used
        sasl_username: SASL username
        sasl_password: SASL password (SecretStr)
        ssl_ca_location: CA bundle path for broker certificate verification
        ssl_certificate_location: Client certificate path for mutual TLS
        ssl_key_location: Client private key path for mutual TLS

    Example:
        >>> config = ModelKafkaSecurityConfig(bootstrap_servers="kafka:9092")
        >>> config.security_protocol
        <EnumSecurityProtocol.PLAINTEXT: 'PLAINTEXT'>
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    bootstrap_servers: str = Field(
        min_length=1,
        description="Comma-separated Kafka broker addresses",
    )
    client_id: str | None = Field(
        default=None,
        description="Client identifier reported to brokers",
    )
    security_protocol: EnumSecurityProtocol = Field(
        default=EnumSecurityProtocol.PLAINTEXT,
        description="Transport security protocol",
    )
    sasl_mechanism: EnumSaslMechanism | None = Field(
        default=None,
        description="SASL mechanism for SASL_PLAINTEXT and SASL_SSL",
    )
    sasl_username: str | None = Field(
        default=None,
        description="SASL username",
    )
    sasl_password: SecretStr | None = Field(
        default=None,
        description="SASL password (SecretStr for security)",
    )
    ssl_ca_location: str | None = Field(
        default=None,
        description="Path to the CA bundle used to verify brokers",
    )
    ssl_certificate_location: str | None = Field(
        default=None,
        description="Path to the client certificate for mutual TLS",
    )
    ssl_key_location: str | None = Field(
        default=None,
        description="Path to the client private key for mutual TLS",
    )

    def build_ssl_context(self) -> ssl.SSLContext | None:
        """Create the TLS context for SSL protocols, ``None`` otherwise."""
        if self.security_protocol not in _TLS_PROTOCOLS:
            return None
        return create_ssl_context(
            cafile=self.ssl_ca_location,
            certfile=self.ssl_certificate_location,
            keyfile=self.ssl_key_location,
        )

    def to_aiokafka_kwargs(self) -> dict[str, object]:
        """Convert to keyword arguments for aiokafka clients.

        Unset optional settings are omitted so aiokafka applies its own
        defaults.
        """
        kwargs: dict[str, object] = {
            "bootstrap_servers": self.bootstrap_servers,
            "security_protocol": self.security_protocol.value,
        }
        if self.client_id:
            kwargs["client_id"] = self.client_id
        if self.sasl_mechanism is not None:
            kwargs["sasl_mechanism"] = self.sasl_mechanism.value
        if self.sasl_username is not None:
            kwargs["sasl_plain_username"] = self.sasl_username
        if self.sasl_password is not None:
            kwargs["sasl_plain_password"] = self.sasl_password.get_secret_value()
        ssl_context = self.build_ssl_context()
        if ssl_context is not None:
            kwargs["ssl_context"] = ssl_context
        return kwargs


__all__: list[str] = ["ModelKafkaSecurityConfig"]
