"""Unit tests for the public SDK surface."""

from __future__ import annotations

from datetime import datetime, timezone

import yaml

import chart_index


def test_sdk_update_index_file_appends_entry(tmp_path) -> None:
    """SDK re-exports should drive a full update without the CLI."""
    target = tmp_path / "index.yaml"
    target.write_text("entries: []\n", encoding="utf-8")
    constants = tmp_path / "constants.yaml"
    constants.write_text("color: red\n", encoding="utf-8")
    parameters = tmp_path / "parameters.yaml"
    parameters.write_text("color: blue\nsize: large\n", encoding="utf-8")

    result = chart_index.update_index_file(
        chart_index.IndexUpdateRequest(
            target_path=target,
            constants_path=constants,
            parameters_path=parameters,
            now=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        )
    )

    assert result.entry == {
        "color": "blue",
        "size": "large",
        "created": "2024-01-02T03:04:05.000Z",
    } and yaml.safe_load(target.read_text(encoding="utf-8"))["entries"] == [dict(result.entry)]


def test_sdk_errors_share_base_class() -> None:
    """Every chart-index error should derive from ChartIndexError."""
    assert all(
        issubclass(error_type, chart_index.ChartIndexError)
        for error_type in (
            chart_index.ChartIndexConfigError,
            chart_index.ChartIndexIOError,
            chart_index.ChartIndexParseError,
            chart_index.ChartIndexSchemaError,
        )
    )
