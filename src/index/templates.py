"""Starter template generation.

This module writes skeleton constants and parameters files, plus an
optional empty index, so a new chart can be registered with ``update``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from core.constants import (
    CONSTANTS_FILE_NAME,
    DEFAULT_ENTRIES_FIELD,
    INDEX_FILE_NAME,
    PARAMETERS_FILE_NAME,
)
from core.errors import ChartIndexIOError
from core.logging_config import get_logger
from core.types import TemplateGenerationResult
from core.yaml_io import dump_yaml_document, write_text_exclusive
from index.merge import default_index_document

_LOGGER = get_logger(__name__)


def build_constants_template() -> dict[str, Any]:
    """Return placeholder values shared by every release of a chart."""
    return {
        "apiVersion": "v2",
        "appVersion": "1.0.0",
        "description": "Example chart",
        "home": "https://example.com",
        "icon": "https://example.com/icon.png",
        "keywords": ["example", "chart"],
        "maintainers": [
            {
                "email": "maintainer@example.com",
                "name": "Example Maintainer",
                "url": "https://example.com",
            }
        ],
        "name": "example-chart",
        "sources": ["https://github.com/example/example-chart"],
        "type": "application",
    }


def build_parameters_template() -> dict[str, Any]:
    """Return placeholder values that change with each release."""
    return {
        "appVersion": "1.0.0",
        "digest": "replace-with-chart-archive-sha256",
        "version": "0.1.0",
        "urls": ["https://example.com/charts/example-chart-0.1.0.tgz"],
    }


def generate_templates(
    output_dir: Path | str = ".",
    include_index: bool = False,
    entries_field: str = DEFAULT_ENTRIES_FIELD,
    grouped: bool = False,
) -> TemplateGenerationResult:
    """Write template files without overwriting anything.

    Every destination is checked before the first file is created, so an
    existing file aborts the run with nothing written.

    Args:
        output_dir: Directory receiving the templates.
        include_index: Also write an empty ``index.yaml``.
        entries_field: Entries field name used in the index template.
        grouped: Shape the index template for grouped entries.

    Returns:
        Paths of the written files.

    Raises:
        ChartIndexIOError: If a template already exists or cannot be created.
    """
    target_dir = Path(output_dir).expanduser()
    if not target_dir.is_dir():
        raise ChartIndexIOError(
            f"Template output directory {target_dir} does not exist. Create it and retry."
        )
    payloads = {
        CONSTANTS_FILE_NAME: build_constants_template(),
        PARAMETERS_FILE_NAME: build_parameters_template(),
    }
    if include_index:
        payloads[INDEX_FILE_NAME] = default_index_document(entries_field, grouped)
    destinations = [target_dir / file_name for file_name in payloads]
    _ensure_absent(destinations)
    written_paths = []
    for destination, payload in zip(destinations, payloads.values()):
        write_text_exclusive(destination, dump_yaml_document(payload))
        written_paths.append(destination)
    _LOGGER.info(
        "templates_generated",
        output_dir=str(target_dir),
        file_names=[path.name for path in written_paths],
    )
    return TemplateGenerationResult(written_paths=tuple(written_paths))


def _ensure_absent(destinations: list[Path]) -> None:
    existing = [str(path) for path in destinations if path.exists()]
    if existing:
        raise ChartIndexIOError(
            f"Refusing to overwrite existing template files: {', '.join(existing)}. "
            "Remove them or choose another output directory."
        )
