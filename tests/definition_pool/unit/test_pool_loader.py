"""Definitions file loading tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_embedder.definition_pool import (
    DefinitionPoolError,
    DefinitionsNotFoundError,
    DefinitionsParseError,
    MissingDefinitionsKeyError,
    load_definition_pool,
)


def _write(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_named_definitions(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "definitions.json",
        json.dumps({"definitions": {"id": {"type": "integer", "minimum": 1}, "name": {}}}),
    )

    pool = load_definition_pool(path)

    assert pool.source == path
    assert pool.definitions["id"] == {"type": "integer", "minimum": 1}
    assert "name" in pool
    assert "other" not in pool
    assert not pool.is_empty


def test_empty_definitions_object_loads_as_empty_pool(tmp_path: Path) -> None:
    pool = load_definition_pool(_write(tmp_path / "definitions.json", '{"definitions": {}}'))

    assert pool.is_empty


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(DefinitionsNotFoundError):
        load_definition_pool(tmp_path / "definitions.json")


def test_invalid_json_raises_parse_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "definitions.json", "{not-json")

    with pytest.raises(DefinitionsParseError):
        load_definition_pool(path)


@pytest.mark.parametrize(
    "contents",
    [
        "{}",
        '{"definitions": []}',
        '{"definitions": "id"}',
        '{"other": {"id": {}}}',
        "[]",
    ],
)
def test_missing_or_malformed_definitions_key_is_rejected(tmp_path: Path, contents: str) -> None:
    path = _write(tmp_path / "definitions.json", contents)

    with pytest.raises(MissingDefinitionsKeyError, match="missing definitions"):
        load_definition_pool(path)


def test_all_failures_share_a_base_class(tmp_path: Path) -> None:
    with pytest.raises(DefinitionPoolError):
        load_definition_pool(tmp_path / "absent.json")
