# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Partition keys derived from annotated message fields.

Fields marked with ``PartitionKey`` supply the Kafka message key, so every
message about the same entity lands on the same partition::

    @event_topic("order-placed")
    class OrderPlaced(BaseModel):
        tenant_id: Annotated[str, PartitionKey(order=0)]
        order_id: Annotated[UUID, PartitionKey(order=1)]
        total: Decimal

    get_partition_key_function(OrderPlaced)(event)  # "acme|7c1e..."

Composite keys join values with ``|`` in ascending ``order``; ties keep
field declaration order. ``None`` values render as empty strings.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, Final, get_args, get_origin, get_type_hints

PARTITION_KEY_DELIMITER: Final[str] = "|"

PartitionKeyFunction = Callable[[object], str]

_partition_key_cache: dict[type, PartitionKeyFunction | None] = {}


@dataclass(frozen=True)
class PartitionKey:
    """Marks a field as a partition key component.

    Attributes:
        order: Position of this component in a composite key.
    """

    order: int = 0


def _field_metadata(message_type: type) -> list[tuple[str, tuple[object, ...]]]:
    # Pydantic strips Annotated[...] and keeps the extras on FieldInfo.metadata.
    model_fields = getattr(message_type, "model_fields", None)
    if isinstance(model_fields, dict):
        return [(name, tuple(info.metadata)) for name, info in model_fields.items()]

    result: list[tuple[str, tuple[object, ...]]] = []
    for name, hint in get_type_hints(message_type, include_extras=True).items():
        if get_origin(hint) is Annotated:
            result.append((name, get_args(hint)[1:]))
    return result


def _find_partition_key_fields(message_type: type) -> list[str]:
    marked: list[tuple[int, int, str]] = []
    for index, (name, metadata) in enumerate(_field_metadata(message_type)):
        for meta in metadata:
            if isinstance(meta, PartitionKey):
                marked.append((meta.order, index, name))
                break
    marked.sort()
    return [name for _, _, name in marked]


def get_partition_key_function(message_type: type) -> PartitionKeyFunction | None:
    """Build (and memoize) the partition key getter for ``message_type``.

    Args:
        message_type: Message class whose fields may carry ``PartitionKey``.

    Returns:
        ``None`` when no field is marked, otherwise a callable returning the
        partition key of a message instance.
    """
    if message_type in _partition_key_cache:
        return _partition_key_cache[message_type]

    field_names = _find_partition_key_fields(message_type)
    if not field_names:
        return _partition_key_cache.setdefault(message_type, None)

    def _get_partition_key(message: object) -> str:
        values = (getattr(message, name) for name in field_names)
        return PARTITION_KEY_DELIMITER.join(
            "" if value is None else str(value) for value in values
        )

    return _partition_key_cache.setdefault(message_type, _get_partition_key)


__all__: list[str] = [
    "PARTITION_KEY_DELIMITER",
    "PartitionKey",
    "PartitionKeyFunction",
    "get_partition_key_function",
]
