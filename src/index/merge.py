"""Merge-and-append workflow for chart index documents.

This module combines constants and parameters into one timestamped chart
entry and appends it to the index document's entry list. The target file
is only rewritten after the whole update has been built and verified.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from core.constants import (
    DEFAULT_ENTRIES_FIELD,
    DEFAULT_INDEX_API_VERSION,
    DEFAULT_TIMESTAMP_FIELD,
    INDEX_API_VERSION_FIELD,
)
from core.errors import ChartIndexSchemaError
from core.logging_config import get_logger
from core.types import IndexUpdateRequest, IndexUpdateResult
from core.yaml_io import (
    dump_yaml_document,
    expect_mapping,
    load_yaml_document,
    parse_yaml_text,
    write_text_atomic,
)

_LOGGER = get_logger(__name__)


def format_created_timestamp(moment: datetime | None = None) -> str:
    """Render a creation timestamp in fixed, sortable UTC form.

    Args:
        moment: Time to render; defaults to now. Naive values are taken as UTC.

    Returns:
        Timestamp such as ``2024-05-01T12:30:45.123Z``.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def merge_entry(
    constants: Mapping[str, Any],
    parameters: Mapping[str, Any],
    created: str,
    timestamp_field: str = DEFAULT_TIMESTAMP_FIELD,
) -> dict[str, Any]:
    """Build a chart entry from shared constants and release parameters.

    Parameters override constants on key collision, and the timestamp is
    written last so it replaces any same-named input key.

    Args:
        constants: Values shared across releases.
        parameters: Values for this release.
        created: Rendered creation timestamp.
        timestamp_field: Key receiving the timestamp.

    Returns:
        New merged mapping; inputs are left untouched.
    """
    entry = dict(constants)
    entry.update(parameters)
    entry[timestamp_field] = created
    return entry


def append_entry(
    document: Mapping[str, Any],
    entry: Mapping[str, Any],
    entries_field: str = DEFAULT_ENTRIES_FIELD,
    group_by: str | None = None,
) -> dict[str, Any]:
    """Return a copy of an index document with one more entry.

    Args:
        document: Parsed index document.
        entry: Merged entry to append.
        entries_field: Top-level field holding entries.
        group_by: When set, entries live under ``entries_field[entry[group_by]]``.

    Returns:
        Updated document; existing entries and fields are carried over as-is.

    Raises:
        ChartIndexSchemaError: If the entries field has the wrong shape.
    """
    updated = dict(document)
    if group_by is None:
        entries = _expect_entry_list(updated.get(entries_field), f"field '{entries_field}'")
        updated[entries_field] = [*entries, dict(entry)]
        return updated
    group_name = _group_name(entry, group_by)
    groups = _expect_entry_groups(updated.get(entries_field), entries_field)
    group_entries = _expect_entry_list(
        groups.get(group_name),
        f"group '{group_name}' in field '{entries_field}'",
    )
    groups[group_name] = [*group_entries, dict(entry)]
    updated[entries_field] = groups
    return updated


def update_index_file(request: IndexUpdateRequest) -> IndexUpdateResult:
    """Merge constants and parameters into a new entry and append it to the target.

    Args:
        request: Paths and field options for this run.

    Returns:
        Result describing the appended entry.

    Raises:
        ChartIndexIOError: If any file cannot be read or the target cannot be written.
        ChartIndexParseError: If any file is not valid YAML.
        ChartIndexSchemaError: If any document has the wrong shape.
    """
    target_path = Path(request.target_path).expanduser()
    document = _load_index_document(target_path, request.entries_field, request.group_by)
    constants = expect_mapping(
        load_yaml_document(Path(request.constants_path).expanduser(), "constants file"),
        f"constants file {request.constants_path}",
    )
    parameters = expect_mapping(
        load_yaml_document(Path(request.parameters_path).expanduser(), "parameters file"),
        f"parameters file {request.parameters_path}",
    )
    _LOGGER.debug(
        "documents_loaded",
        target_path=str(target_path),
        constant_keys=sorted(constants),
        parameter_keys=sorted(parameters),
    )
    entry = merge_entry(
        constants,
        parameters,
        format_created_timestamp(request.now),
        request.timestamp_field,
    )
    updated = append_entry(document, entry, request.entries_field, request.group_by)
    rendered = dump_yaml_document(updated)
    _verify_round_trip(rendered, updated, target_path)
    write_text_atomic(target_path, rendered)
    group_name = _group_name(entry, request.group_by) if request.group_by else None
    entry_count = len(_entry_list(updated, request.entries_field, group_name))
    _LOGGER.info(
        "entry_appended",
        target_path=str(target_path),
        group_name=group_name,
        entry_count=entry_count,
        created=entry[request.timestamp_field],
    )
    return IndexUpdateResult(
        target_path=target_path,
        entry=entry,
        entry_count=entry_count,
        group_name=group_name,
    )


def default_index_document(
    entries_field: str = DEFAULT_ENTRIES_FIELD,
    grouped: bool = False,
) -> dict[str, Any]:
    """Build an empty index document."""
    empty_entries: dict[str, Any] | list[Any] = {} if grouped else []
    return {
        INDEX_API_VERSION_FIELD: DEFAULT_INDEX_API_VERSION,
        entries_field: empty_entries,
    }


def _load_index_document(
    target_path: Path,
    entries_field: str,
    group_by: str | None,
) -> dict[str, Any]:
    payload = load_yaml_document(target_path, "target index file")
    if payload is None:
        return default_index_document(entries_field, grouped=group_by is not None)
    return expect_mapping(payload, f"target index file {target_path}")


def _expect_entry_list(value: object, context: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    raise ChartIndexSchemaError(
        f"Invalid {context}: expected a list of entries, got {type(value).__name__}."
    )


def _expect_entry_groups(value: object, entries_field: str) -> dict[str, Any]:
    if value is None:
        return {}
    return expect_mapping(value, f"field '{entries_field}' (grouped entries)")


def _group_name(entry: Mapping[str, Any], group_by: str) -> str:
    raw_name = entry.get(group_by)
    if raw_name is None or (isinstance(raw_name, str) and not raw_name.strip()):
        raise ChartIndexSchemaError(
            f"Cannot group entry: merged entry has no '{group_by}' value. "
            f"Add '{group_by}' to the constants or parameters file."
        )
    return str(raw_name)


def _entry_list(
    document: Mapping[str, Any],
    entries_field: str,
    group_name: str | None,
) -> list[Any]:
    entries = document[entries_field]
    if group_name is None:
        return entries
    return entries[group_name]


def _verify_round_trip(
    rendered: str,
    expected: Mapping[str, Any],
    target_path: Path,
) -> None:
    reparsed = parse_yaml_text(rendered, f"rendered index for {target_path}")
    if reparsed != expected:
        raise ChartIndexSchemaError(
            f"Refusing to write {target_path}: serialized index does not re-parse to "
            "the same document. Check the inputs for values YAML cannot represent."
        )
