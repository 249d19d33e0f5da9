"""Unit tests for template generation."""

from __future__ import annotations

import pytest
import yaml

from core.errors import ChartIndexIOError
from index.templates import (
    build_constants_template,
    build_parameters_template,
    generate_templates,
)


def test_generate_templates_writes_constants_and_parameters(tmp_path) -> None:
    """Generator should write the two template files."""
    result = generate_templates(tmp_path)

    assert sorted(path.name for path in result.written_paths) == [
        "constants.yaml",
        "parameters.yaml",
    ] and sorted(path.name for path in tmp_path.iterdir()) == ["constants.yaml", "parameters.yaml"]


def test_generated_templates_parse_back_to_mappings(tmp_path) -> None:
    """Written templates should be valid YAML mappings matching the builders."""
    generate_templates(tmp_path)

    constants = yaml.safe_load((tmp_path / "constants.yaml").read_text(encoding="utf-8"))
    parameters = yaml.safe_load((tmp_path / "parameters.yaml").read_text(encoding="utf-8"))

    assert constants == build_constants_template() and parameters == build_parameters_template()


def test_generate_templates_with_index_writes_empty_index(tmp_path) -> None:
    """Optional index template should hold an empty entries list."""
    generate_templates(tmp_path, include_index=True)

    index_document = yaml.safe_load((tmp_path / "index.yaml").read_text(encoding="utf-8"))

    assert index_document == {"apiVersion": "v1", "entries": []}


def test_generate_templates_grouped_index_uses_mapping(tmp_path) -> None:
    """Grouped index template should hold an empty entries mapping."""
    generate_templates(tmp_path, include_index=True, grouped=True)

    index_document = yaml.safe_load((tmp_path / "index.yaml").read_text(encoding="utf-8"))

    assert index_document["entries"] == {}


def test_generate_templates_refuses_existing_constants(tmp_path) -> None:
    """Existing constants file should abort without writing anything."""
    existing = tmp_path / "constants.yaml"
    existing.write_text("keep: me\n", encoding="utf-8")

    with pytest.raises(ChartIndexIOError):
        generate_templates(tmp_path)

    assert existing.read_text(encoding="utf-8") == "keep: me\n" and not (
        tmp_path / "parameters.yaml"
    ).exists()


def test_generate_templates_missing_directory_raises_io_error(tmp_path) -> None:
    """Missing output directory should raise an IO error."""
    with pytest.raises(ChartIndexIOError):
        generate_templates(tmp_path / "missing")
    assert True


def test_templates_share_only_app_version() -> None:
    """Templates should share only the appVersion key, which parameters override."""
    shared_keys = set(build_constants_template()) & set(build_parameters_template())

    assert shared_keys == {"appVersion"}
