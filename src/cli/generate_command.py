"""Generate command wiring for chart-index CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import ChartIndexConfig
from index.templates import generate_templates


def add_generate_command(subparsers: Any) -> None:
    """Register generate subcommand."""
    parser = subparsers.add_parser(
        "generate",
        help="Generate constants and parameters YAML templates",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory receiving the templates (default: current directory)",
    )
    parser.add_argument(
        "--with-index",
        action="store_true",
        help="Also write an empty index.yaml",
    )


def run_generate_command(config: ChartIndexConfig, args: argparse.Namespace) -> int:
    """Handle generate command invocation."""
    result = generate_templates(
        output_dir=args.output_dir,
        include_index=args.with_index,
        entries_field=config.entries_field,
        grouped=config.group_by is not None,
    )
    print("YAML templates generated")
    for path in result.written_paths:
        print(path)
    return 0
