"""SASL mechanism enumeration for Kafka authentication."""

from enum import Enum


class EnumSaslMechanism(str, Enum):
    """Enumeration for Kafka SASL mechanisms.

    Values match the mechanism names aiokafka accepts for
    ``sasl_mechanism``.
    """

    GSSAPI = "GSSAPI"
    PLAIN = "PLAIN"
    SCRAM_SHA_256 = "SCRAM-SHA-256"
    SCRAM_SHA_512 = "SCRAM-SHA-512"
    OAUTHBEARER = "OAUTHBEARER"
