"""Chart-index exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure class maps onto one CLI-visible error category.
"""

from __future__ import annotations


class ChartIndexError(Exception):
    """Base exception for all chart-index failures."""


class ChartIndexConfigError(ChartIndexError):
    """Raised for invalid runtime configuration."""


class ChartIndexParseError(ChartIndexError):
    """Raised when an input file is not valid YAML."""


class ChartIndexSchemaError(ChartIndexError):
    """Raised when a YAML document has the wrong shape."""


class ChartIndexIOError(ChartIndexError):
    """Raised when a file cannot be read, written, or would be overwritten."""
