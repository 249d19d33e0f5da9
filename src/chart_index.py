"""Public SDK surface for chart-index.

This module provides a stable import path for library users.
It re-exports the index operations and typed request models.
"""

from __future__ import annotations

from core.config import ChartIndexConfig
from core.errors import (
    ChartIndexConfigError,
    ChartIndexError,
    ChartIndexIOError,
    ChartIndexParseError,
    ChartIndexSchemaError,
)
from core.types import IndexUpdateRequest, IndexUpdateResult, TemplateGenerationResult
from index.merge import append_entry, format_created_timestamp, merge_entry, update_index_file
from index.templates import generate_templates

__all__ = [
    "ChartIndexConfig",
    "ChartIndexConfigError",
    "ChartIndexError",
    "ChartIndexIOError",
    "ChartIndexParseError",
    "ChartIndexSchemaError",
    "IndexUpdateRequest",
    "IndexUpdateResult",
    "TemplateGenerationResult",
    "append_entry",
    "format_created_timestamp",
    "generate_templates",
    "merge_entry",
    "update_index_file",
]
