"""Update command wiring for chart-index CLI.

This module registers the update subcommand and maps its flags onto an
index update request.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from core.config import ChartIndexConfig
from core.types import IndexUpdateRequest
from index.merge import update_index_file


def add_update_command(subparsers: Any) -> None:
    """Register update subcommand."""
    parser = subparsers.add_parser(
        "update",
        help="Append a merged chart entry to an index YAML file",
    )
    parser.add_argument("-f", "--file", required=True, help="Path to the index YAML file to update")
    parser.add_argument(
        "-c",
        "--constants",
        required=True,
        help="Path to the constants YAML file",
    )
    parser.add_argument(
        "-p",
        "--parameters",
        required=True,
        help="Path to the parameters YAML file",
    )
    parser.add_argument(
        "--entries-field",
        help="Override CHART_INDEX_ENTRIES_FIELD for this command",
    )
    parser.add_argument(
        "--group-by",
        help="Group entries by this entry key, e.g. name for Helm index files",
    )


def run_update_command(config: ChartIndexConfig, args: argparse.Namespace) -> int:
    """Handle update command invocation."""
    request = IndexUpdateRequest(
        target_path=Path(args.file),
        constants_path=Path(args.constants),
        parameters_path=Path(args.parameters),
        entries_field=args.entries_field or config.entries_field,
        timestamp_field=config.timestamp_field,
        group_by=args.group_by or config.group_by,
    )
    result = update_index_file(request)
    print(f"Added new entry to {result.target_path}")
    return 0
