"""Core constants used across chart-index modules.

This module centralizes file names, field names, and formats.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

DEFAULT_ENTRIES_FIELD = "entries"
DEFAULT_TIMESTAMP_FIELD = "created"
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
INDEX_API_VERSION_FIELD = "apiVersion"
DEFAULT_INDEX_API_VERSION = "v1"
CONSTANTS_FILE_NAME = "constants.yaml"
PARAMETERS_FILE_NAME = "parameters.yaml"
INDEX_FILE_NAME = "index.yaml"
TEMP_FILE_SUFFIX = ".tmp"
EXIT_FAILURE = 1
