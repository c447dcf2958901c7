"""Consumer auto offset reset policy enumeration."""

from enum import Enum


class EnumAutoOffsetReset(str, Enum):
    """Where a consumer starts reading when no committed offset exists.

    Attributes:
        LATEST: Start from the end of the partition
        EARLIEST: Start from the beginning of the partition
        ERROR: Fail instead of picking a position (aiokafka ``"none"``)
    """

    LATEST = "latest"
    EARLIEST = "earliest"
    ERROR = "none"
