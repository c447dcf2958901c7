# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka topic provisioner for on-demand topic creation at startup.

Hosts call this when the wiring decided auto-provisioning is on (by default
in development-like environments). Uses AIOKafkaAdminClient to create
missing topics with best-effort semantics: failures are logged as warnings
and reported in the summary, never raised.

Design:
    - Best-effort: Logs warnings but never blocks startup on failure
    - Idempotent: Safe to call multiple times (existing topics are skipped)
    - Secure: Connects with the bound producer security settings

Example:
    >>> registration = wiring.configure(host)
    >>> provisioner = TopicProvisioner(registration.producer_config)
    >>> await provisioner.ensure_registration_topics(registration)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final
from uuid import UUID, uuid4

from aiokafka.admin import AIOKafkaAdminClient, NewTopic
from aiokafka.errors import TopicAlreadyExistsError

from messaging_kafka.configuration.models import ModelKafkaSecurityConfig
from messaging_kafka.utils import sanitize_bootstrap_servers
from messaging_kafka.wiring.model_kafka_transport_registration import (
    ModelKafkaTransportRegistration,
)

logger = logging.getLogger(__name__)

DEFAULT_TOPIC_PARTITIONS: Final[int] = 6
DEFAULT_TOPIC_REPLICATION_FACTOR: Final[int] = 1

# Client keyword arguments AIOKafkaAdminClient accepts.
_ADMIN_KWARGS: Final[frozenset[str]] = frozenset(
    {
        "bootstrap_servers",
        "client_id",
        "security_protocol",
        "ssl_context",
        "sasl_mechanism",
        "sasl_plain_username",
        "sasl_plain_password",
    }
)

ProvisioningSummary = dict[str, list[str] | str]


class TopicProvisioner:
    """Provisions Kafka topics that do not exist yet.

    Thread Safety:
        This class is coroutine-safe. Each call opens and closes its own
        admin client.

    Args:
        connection_config: Bound settings of the connection (producer
            settings are typical); only connection and security fields are
            used.
        request_timeout_ms: Timeout for admin operations in milliseconds.
    """

    def __init__(
        self,
        connection_config: ModelKafkaSecurityConfig,
        request_timeout_ms: int = 30000,
    ) -> None:
        self._connection_config = connection_config
        self._request_timeout_ms = request_timeout_ms

    def _admin_kwargs(self) -> dict[str, object]:
        kwargs = {
            key: value
            for key, value in self._connection_config.to_aiokafka_kwargs().items()
            if key in _ADMIN_KWARGS
        }
        kwargs["request_timeout_ms"] = self._request_timeout_ms
        return kwargs

    async def ensure_topics_exist(
        self,
        topics: Iterable[str],
        partitions: int = DEFAULT_TOPIC_PARTITIONS,
        replication_factor: int = DEFAULT_TOPIC_REPLICATION_FACTOR,
        correlation_id: UUID | None = None,
    ) -> ProvisioningSummary:
        """Create every topic in ``topics`` that does not exist yet.

        Individual topic failures are logged as warnings and do not prevent
        the remaining topics from being created. Connection failures are
        logged as warnings too.

        Args:
            topics: Topic names; duplicates are ignored.
            partitions: Partition count for new topics.
            replication_factor: Replication factor for new topics.
            correlation_id: Optional correlation ID for tracing.

        Returns:
            Summary dict with:
                - created: List of newly created topic names
                - existing: List of topics that already existed
                - failed: List of topics that failed or were never attempted
                - status: "success", "partial", or "unavailable"
        """
        correlation_id = correlation_id or uuid4()
        wanted = list(dict.fromkeys(topics))
        created: list[str] = []
        existing: list[str] = []
        failed: list[str] = []

        admin: AIOKafkaAdminClient | None = None
        try:
            admin = AIOKafkaAdminClient(**self._admin_kwargs())
            await admin.start()

            for topic in wanted:
                try:
                    await admin.create_topics(
                        [
                            NewTopic(
                                name=topic,
                                num_partitions=partitions,
                                replication_factor=replication_factor,
                            )
                        ]
                    )
                    created.append(topic)
                    logger.info(
                        "Created topic: %s (partitions=%d)",
                        topic,
                        partitions,
                        extra={"correlation_id": str(correlation_id)},
                    )

                except TopicAlreadyExistsError:
                    existing.append(topic)
                    logger.debug(
                        "Topic already exists: %s",
                        topic,
                        extra={"correlation_id": str(correlation_id)},
                    )

                except Exception as e:
                    failed.append(topic)
                    logger.warning(
                        "Failed to create topic %s: %s",
                        topic,
                        type(e).__name__,
                        extra={"correlation_id": str(correlation_id), "error": str(e)},
                    )

        except Exception as e:
            logger.warning(
                "Topic provisioning interrupted by %s. "
                "Topics may need to be created manually or via broker auto-create.",
                type(e).__name__,
                extra={
                    "bootstrap_servers": sanitize_bootstrap_servers(
                        self._connection_config.bootstrap_servers
                    ),
                    "correlation_id": str(correlation_id),
                    "error": str(e),
                },
            )
            resolved = set(created) | set(existing) | set(failed)
            not_attempted = [topic for topic in wanted if topic not in resolved]
            return {
                "created": created,
                "existing": existing,
                "failed": failed + not_attempted,
                "status": "partial" if (created or existing) else "unavailable",
            }

        finally:
            if admin is not None:
                try:
                    await admin.close()
                except Exception as e:
                    logger.debug(
                        "Error closing admin client: %s",
                        type(e).__name__,
                        extra={"correlation_id": str(correlation_id)},
                    )

        status = (
            "success"
            if not failed
            else ("partial" if created or existing else "unavailable")
        )
        logger.info(
            "Topic provisioning complete",
            extra={
                "created_count": len(created),
                "existing_count": len(existing),
                "failed_count": len(failed),
                "status": status,
                "correlation_id": str(correlation_id),
            },
        )
        return {
            "created": created,
            "existing": existing,
            "failed": failed,
            "status": status,
        }

    async def ensure_registration_topics(
        self,
        registration: ModelKafkaTransportRegistration,
        partitions: int = DEFAULT_TOPIC_PARTITIONS,
        replication_factor: int = DEFAULT_TOPIC_REPLICATION_FACTOR,
        correlation_id: UUID | None = None,
    ) -> ProvisioningSummary:
        """Provision published and subscribed topics of ``registration``.

        Does nothing (status ``"skipped"``) when the registration has
        auto-provisioning disabled.
        """
        if not registration.auto_provision:
            logger.info(
                "Auto-provisioning disabled, skipping topic creation",
                extra={"environment_prefix": registration.environment_prefix},
            )
            return {"created": [], "existing": [], "failed": [], "status": "skipped"}
        return await self.ensure_topics_exist(
            [*registration.published_topics, *registration.subscribed_topics],
            partitions=partitions,
            replication_factor=replication_factor,
            correlation_id=correlation_id,
        )


__all__: list[str] = [
    "DEFAULT_TOPIC_PARTITIONS",
    "DEFAULT_TOPIC_REPLICATION_FACTOR",
    "TopicProvisioner",
]
