# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Hierarchical configuration tree for messaging settings.

Configuration is addressed by colon-delimited paths, matched
case-insensitively::

    ConnectionStrings:Messaging
    Kafka:AutoProvision
    Kafka:Producer:Messaging:Config:Acks
    Kafka:Security:SecurityProtocol

Sources:
    1. Mappings - nested dicts and/or flat colon-delimited keys
    2. YAML files - loaded with ``yaml.safe_load``
    3. Environment variables - ``__`` separates path segments
       (``Kafka__Security__SecurityProtocol=SaslSsl``)

Sources are layered with ``merge``; later trees override earlier ones::

    tree = ConfigurationTree.from_yaml(Path("messaging.yaml")).merge(
        ConfigurationTree.from_env(),
    )

Values keep the type the source produced: strings from the environment,
strings/ints/bools from YAML. ``None`` values are treated as absent.
Trees are immutable once built.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Final

import yaml

from messaging_kafka.enums import EnumInfraTransportType
from messaging_kafka.errors import ModelInfraErrorContext, ProtocolConfigurationError

logger = logging.getLogger(__name__)

KEY_DELIMITER: Final[str] = ":"
ENV_KEY_DELIMITER: Final[str] = "__"
CONNECTION_STRINGS_SECTION: Final[str] = "ConnectionStrings"

# Maximum configuration file size (1MB)
MAX_CONFIG_FILE_SIZE: Final[int] = 1024 * 1024

ConfigValue = str | int | float | bool


def join_key(*segments: str) -> str:
    """Join path segments into a configuration key, skipping empty ones."""
    return KEY_DELIMITER.join(segment for segment in segments if segment)


def _flatten(
    value: object,
    prefix: str,
    out: dict[str, ConfigValue],
) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, child in value.items():
            _flatten(child, join_key(prefix, str(key)), out)
        return
    if isinstance(value, (list, tuple)):
        for index, child in enumerate(value):
            _flatten(child, join_key(prefix, str(index)), out)
        return
    if not prefix:
        raise ProtocolConfigurationError(
            "Configuration root must be a mapping",
            context=_config_context("flatten"),
        )
    if not isinstance(value, (str, int, float, bool)):
        value = str(value)
    out[prefix] = value


def _config_context(operation: str, target_name: str | None = None) -> ModelInfraErrorContext:
    return ModelInfraErrorContext.with_correlation(
        transport_type=EnumInfraTransportType.CONFIGURATION,
        operation=operation,
        target_name=target_name,
    )


class ConfigurationTree:
    """Immutable, case-insensitive view over flattened configuration keys.

    Args:
        values: Flat mapping of colon-delimited keys to scalar values.

    Example:
        >>> tree = ConfigurationTree.from_mapping(
        ...     {"ConnectionStrings": {"Messaging": "localhost:9092"}}
        ... )
        >>> tree.get("connectionstrings:messaging")
        'localhost:9092'
    """

    def __init__(self, values: Mapping[str, ConfigValue] | None = None) -> None:
        # Lowercased key -> (original key, value); last write wins.
        self._entries: dict[str, tuple[str, ConfigValue]] = {}
        for key, value in (values or {}).items():
            if value is None:
                continue
            self._entries[key.lower()] = (key, value)

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> ConfigurationTree:
        """Build a tree from nested dicts and/or flat colon-delimited keys."""
        flat: dict[str, ConfigValue] = {}
        _flatten(mapping, "", flat)
        return cls(flat)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ConfigurationTree:
        """Build a tree from a YAML file.

        Raises:
            ProtocolConfigurationError: If the file is missing, too large,
                not valid YAML, or its root is not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ProtocolConfigurationError(
                f"Configuration file not found: {path}",
                context=_config_context("load_yaml", str(path)),
            )

        file_size = path.stat().st_size
        if file_size > MAX_CONFIG_FILE_SIZE:
            raise ProtocolConfigurationError(
                f"Configuration file too large: {file_size} bytes (max {MAX_CONFIG_FILE_SIZE})",
                context=_config_context("load_yaml", str(path)),
            )

        try:
            with path.open(encoding="utf-8") as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ProtocolConfigurationError(
                f"Invalid YAML in configuration file {path}: {e}",
                context=_config_context("load_yaml", str(path)),
            ) from e

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ProtocolConfigurationError(
                f"Configuration file {path} must contain a mapping, got {type(document).__name__}",
                context=_config_context("load_yaml", str(path)),
            )

        tree = cls.from_mapping(document)
        logger.debug(
            "Loaded configuration file",
            extra={"path": str(path), "key_count": len(tree)},
        )
        return tree

    @classmethod
    def from_env(
        cls,
        prefix: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ConfigurationTree:
        """Build a tree from environment variables.

        ``__`` in a variable name becomes ``:``. When ``prefix`` is given,
        only variables starting with it are read and the prefix is removed.

        Args:
            prefix: Optional variable name prefix (``"MYAPP_"``).
            environ: Variables to read; defaults to ``os.environ``.
        """
        source = os.environ if environ is None else environ
        flat: dict[str, ConfigValue] = {}
        for name, value in source.items():
            if prefix:
                if not name.startswith(prefix):
                    continue
                name = name[len(prefix) :]
            if not name:
                continue
            flat[name.replace(ENV_KEY_DELIMITER, KEY_DELIMITER)] = value
        return cls(flat)

    def merge(self, *others: ConfigurationTree) -> ConfigurationTree:
        """Layer ``others`` on top of this tree; later values win."""
        merged: dict[str, ConfigValue] = dict(self.items())
        lowered = {key.lower(): key for key in merged}
        for other in others:
            for key, value in other.items():
                previous = lowered.pop(key.lower(), None)
                if previous is not None:
                    del merged[previous]
                merged[key] = value
                lowered[key.lower()] = key
        return ConfigurationTree(merged)

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, key: str, default: ConfigValue | None = None) -> ConfigValue | None:
        """Return the value at ``key`` or ``default`` when absent."""
        entry = self._entries.get(key.lower())
        if entry is None:
            return default
        return entry[1]

    def get_string(self, key: str) -> str | None:
        """Return the value at ``key`` as a stripped string, ``None`` when blank."""
        value = self.get(key)
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    def get_connection_string(self, name: str) -> str | None:
        """Return ``ConnectionStrings:<name>``, ``None`` when absent or blank."""
        return self.get_string(join_key(CONNECTION_STRINGS_SECTION, name))

    def get_section(self, path: str) -> ConfigurationTree:
        """Return the subtree under ``path`` with keys made relative."""
        prefix = path.lower() + KEY_DELIMITER
        return ConfigurationTree(
            {
                original[len(prefix) :]: value
                for lowered, (original, value) in self._entries.items()
                if lowered.startswith(prefix)
            }
        )

    def section_exists(self, path: str) -> bool:
        """Return ``True`` when any key lives at or under ``path``."""
        lowered_path = path.lower()
        prefix = lowered_path + KEY_DELIMITER
        return any(
            key == lowered_path or key.startswith(prefix) for key in self._entries
        )

    def items(self) -> Iterator[tuple[str, ConfigValue]]:
        """Iterate ``(key, value)`` pairs with their original casing."""
        return iter(self._entries.values())

    def keys(self) -> list[str]:
        """Return all keys with their original casing."""
        return [key for key, _ in self._entries.values()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ConfigurationTree(keys={len(self._entries)})"


__all__: list[str] = [
    "CONNECTION_STRINGS_SECTION",
    "ConfigurationTree",
    "join_key",
]
