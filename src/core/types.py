"""Shared typed models.

This module defines immutable request and result models used by the
index updater, template generator, CLI, and SDK surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from core.constants import DEFAULT_ENTRIES_FIELD, DEFAULT_TIMESTAMP_FIELD


@dataclass(frozen=True)
class IndexUpdateRequest:
    """Inputs for one merge-and-append run.

    Attributes:
        target_path: Index YAML file rewritten in place.
        constants_path: YAML mapping of values shared across releases.
        parameters_path: YAML mapping of per-release values.
        entries_field: Top-level field holding the entry list.
        timestamp_field: Key receiving the creation timestamp.
        group_by: Optional entry key that selects a named entry list.
        now: Optional fixed creation time; defaults to the current UTC time.
    """

    target_path: Path
    constants_path: Path
    parameters_path: Path
    entries_field: str = DEFAULT_ENTRIES_FIELD
    timestamp_field: str = DEFAULT_TIMESTAMP_FIELD
    group_by: str | None = None
    now: datetime | None = None


@dataclass(frozen=True)
class IndexUpdateResult:
    """Outcome of a successful merge-and-append run.

    Attributes:
        target_path: Rewritten index file.
        entry: Merged entry that was appended.
        entry_count: Length of the list the entry was appended to.
        group_name: Entry group when the grouped layout is used.
    """

    target_path: Path
    entry: Mapping[str, Any]
    entry_count: int
    group_name: str | None = None


@dataclass(frozen=True)
class TemplateGenerationResult:
    """Files written by the template generator."""

    written_paths: tuple[Path, ...]
