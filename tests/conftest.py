"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_CHART_INDEX_ENV_VARS = (
    "CHART_INDEX_ENTRIES_FIELD",
    "CHART_INDEX_TIMESTAMP_FIELD",
    "CHART_INDEX_GROUP_BY",
    "CHART_INDEX_LOG_LEVEL",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_chart_index_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host CHART_INDEX_* settings out of test runs."""
    for name in _CHART_INDEX_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
