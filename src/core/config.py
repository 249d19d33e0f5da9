"""Runtime configuration model for chart-index.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ENTRIES_FIELD,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMESTAMP_FIELD,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import ChartIndexConfigError


@dataclass(frozen=True)
class ChartIndexConfig:
    """Validated runtime configuration.

    Attributes:
        entries_field: Top-level index field holding chart entries.
        timestamp_field: Key injected into each new entry with its creation time.
        group_by: Optional entry key used to group entries by name.
        log_level: Minimum structured log level.
    """

    entries_field: str = DEFAULT_ENTRIES_FIELD
    timestamp_field: str = DEFAULT_TIMESTAMP_FIELD
    group_by: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ChartIndexConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ChartIndexConfigError: If environment values are invalid.
        """
        entries_field = _parse_field_name(
            "CHART_INDEX_ENTRIES_FIELD",
            os.getenv("CHART_INDEX_ENTRIES_FIELD", DEFAULT_ENTRIES_FIELD),
        )
        timestamp_field = _parse_field_name(
            "CHART_INDEX_TIMESTAMP_FIELD",
            os.getenv("CHART_INDEX_TIMESTAMP_FIELD", DEFAULT_TIMESTAMP_FIELD),
        )
        group_by = _optional_field_name(os.getenv("CHART_INDEX_GROUP_BY"))
        log_level = parse_log_level(os.getenv("CHART_INDEX_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            entries_field=entries_field,
            timestamp_field=timestamp_field,
            group_by=group_by,
            log_level=log_level,
        )


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Level name in any case.

    Returns:
        Upper-case level name.

    Raises:
        ChartIndexConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
        raise ChartIndexConfigError(
            f"Invalid log level '{raw_value}'. Use one of: {supported_rows}."
        )
    return level


def _parse_field_name(env_name: str, raw_value: str) -> str:
    field_name = raw_value.strip()
    if not field_name:
        raise ChartIndexConfigError(
            f"Invalid {env_name} value: expected a non-empty field name. "
            f"Unset {env_name} to use the default."
        )
    return field_name


def _optional_field_name(raw_value: str | None) -> str | None:
    if raw_value is None:
        return None
    field_name = raw_value.strip()
    return field_name if field_name else None
