"""YAML document IO helpers.

This module loads, validates, and persists the YAML documents chart-index
works on. It maps filesystem and parser failures onto the chart-index
error taxonomy so callers never see raw OSError or YAMLError values.
"""

from __future__ import annotations

import os
from pathlib import Path
import shutil
import tempfile
from typing import Any, Mapping, cast

import yaml

from core.constants import TEMP_FILE_SUFFIX
from core.errors import ChartIndexIOError, ChartIndexParseError, ChartIndexSchemaError


def load_yaml_document(path: Path, context: str) -> object:
    """Read and parse one YAML document from disk.

    Args:
        path: File path to read.
        context: Human-readable role of the file, e.g. "constants file".

    Returns:
        Parsed YAML payload, or None for an empty document.

    Raises:
        ChartIndexIOError: If the file is missing or unreadable.
        ChartIndexParseError: If the file is not valid YAML.
    """
    if not path.is_file():
        raise ChartIndexIOError(
            f"The {context} does not exist at {path}. Provide a valid YAML file path."
        )
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise ChartIndexIOError(
            f"Failed to read {context} at {path}: {error}. Check file permissions and retry."
        ) from error
    return parse_yaml_text(raw_text, f"{context} at {path}")


def parse_yaml_text(raw_text: str, context: str) -> object:
    """Parse YAML text with the safe loader.

    Raises:
        ChartIndexParseError: If the text is not valid YAML.
    """
    try:
        return cast(object, yaml.safe_load(raw_text))
    except yaml.YAMLError as error:
        raise ChartIndexParseError(
            f"Failed to parse YAML in {context}: {error}. Fix YAML syntax and retry."
        ) from error


def expect_mapping(value: object, context: str) -> dict[str, Any]:
    """Return a YAML payload as a string-keyed dict.

    Args:
        value: Parsed YAML payload.
        context: Description used in error messages.

    Returns:
        Shallow copy of the mapping.

    Raises:
        ChartIndexSchemaError: If the payload is not a mapping with string keys.
    """
    if not isinstance(value, Mapping):
        raise ChartIndexSchemaError(
            f"Invalid {context}: expected a YAML mapping, got {_yaml_type_name(value)}."
        )
    normalized_mapping: dict[str, Any] = {}
    for key, payload in value.items():
        if not isinstance(key, str):
            raise ChartIndexSchemaError(
                f"Invalid {context}: expected string keys, got {type(key).__name__}."
            )
        normalized_mapping[key] = payload
    return normalized_mapping


def dump_yaml_document(payload: Mapping[str, Any]) -> str:
    """Serialize a mapping to block-style YAML preserving key order."""
    return yaml.safe_dump(
        dict(payload),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def write_text_atomic(path: Path, text: str) -> None:
    """Replace a file's contents in one rename.

    The text goes to a unique sibling temp file first, so an interrupted
    write leaves the original file intact. Symlinks are followed, so the
    linked file is rewritten and the link itself is kept. An existing
    file's permission bits carry over to the new contents.

    Raises:
        ChartIndexIOError: If the temp file cannot be written or moved.
    """
    real_path = path.resolve()
    temp_path: Path | None = None
    try:
        file_descriptor, temp_name = tempfile.mkstemp(
            dir=real_path.parent,
            prefix=f".{real_path.name}.",
            suffix=TEMP_FILE_SUFFIX,
        )
        temp_path = Path(temp_name)
        with os.fdopen(file_descriptor, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if real_path.exists():
            shutil.copymode(real_path, temp_path)
        os.replace(temp_path, real_path)
    except OSError as error:
        if temp_path is not None:
            _remove_quietly(temp_path)
        raise ChartIndexIOError(
            f"Failed to write {path}: {error}. Check directory permissions and retry."
        ) from error


def write_text_exclusive(path: Path, text: str) -> None:
    """Create a new file, refusing to touch an existing one.

    Raises:
        ChartIndexIOError: If the file exists or cannot be created.
    """
    try:
        with open(path, "x", encoding="utf-8") as handle:
            handle.write(text)
    except FileExistsError as error:
        raise ChartIndexIOError(
            f"Refusing to overwrite existing file {path}. Remove it or choose another directory."
        ) from error
    except OSError as error:
        raise ChartIndexIOError(
            f"Failed to create {path}: {error}. Check that the directory exists and is writable."
        ) from error


def _remove_quietly(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        # keep the original write error
        return


def _yaml_type_name(value: object) -> str:
    if value is None:
        return "an empty document"
    if isinstance(value, list):
        return "a list"
    return type(value).__name__
