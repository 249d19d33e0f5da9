"""Chart-index CLI entry points.

This module exposes the update and generate commands.
It maps argparse commands onto index operations and turns chart-index
errors into exit codes.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import sys
from typing import Sequence

from cli.generate_command import add_generate_command, run_generate_command
from cli.update_command import add_update_command, run_update_command
from core.config import ChartIndexConfig, parse_log_level
from core.constants import EXIT_FAILURE, SUPPORTED_LOG_LEVELS
from core.errors import ChartIndexError
from core.logging_config import configure_logging, get_logger

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="chart-index",
        description="Append chart entries to index YAML files",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override CHART_INDEX_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_update_command(subparsers)
    add_generate_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chart-index CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.log_level)
        configure_logging(config.log_level)
        if args.command == "update":
            return run_update_command(config, args)
        if args.command == "generate":
            return run_generate_command(config, args)
    except ChartIndexError as error:
        _LOGGER.error("command_failed", command=args.command, error_type=type(error).__name__)
        print(f"error: {error}", file=sys.stderr)
        return EXIT_FAILURE
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(log_level: str | None) -> ChartIndexConfig:
    """Build config with optional log-level override.

    Args:
        log_level: Optional override level name.

    Returns:
        Validated config.
    """
    config = ChartIndexConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config
