"""CLI orchestration integration tests."""

from __future__ import annotations

import json
import os
import runpy
from pathlib import Path

from click.testing import CliRunner
from schema_embedder.cli import cli, main
from schema_embedder.configuration import SEARCH_ROOTS_ENV_VAR


def _write_json(path: Path, content: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(content), encoding="utf-8")


def _write_tree(root: Path) -> None:
    _write_json(root / "definitions.json", {"definitions": {"id": {"type": "integer"}}})
    _write_json(
        root / "users" / "create.json", {"properties": {"id": {"$ref": "#/definitions/id"}}}
    )
    _write_json(root / "orders" / "list.json", {"type": "array"})


def _asset_names(artifact: Path) -> list[str]:
    return runpy.run_path(str(artifact))["asset_names"]()


def test_generate_command_merges_into_output_package(tmp_path: Path) -> None:
    _write_tree(tmp_path / "schemas")
    output = tmp_path / "api"

    result = CliRunner().invoke(
        cli, ["generate", "--input", str(tmp_path / "schemas"), "--output", str(output)]
    )

    assert result.exit_code == 0, result.output
    assert "api:" in result.output
    assert _asset_names(output / "schema.py") == ["create", "list"]
    assert (output / "bind.py").exists()


def test_generate_command_separate_creates_service_directories(tmp_path: Path) -> None:
    _write_tree(tmp_path / "schemas")
    output = tmp_path / "out"

    result = CliRunner().invoke(
        cli,
        ["generate", "--input", str(tmp_path / "schemas"), "--output", str(output), "--separate"],
    )

    assert result.exit_code == 0, result.output
    assert _asset_names(output / "users" / "schema.py") == ["create"]
    assert _asset_names(output / "orders" / "schema.py") == ["list"]


def test_generate_command_reads_paths_from_config(tmp_path: Path) -> None:
    _write_tree(tmp_path / "schemas")
    config_path = tmp_path / "schema-embedder.yaml"
    config_path.write_text(
        "generation:\n  input: schemas\n  output: out\n  separate: true\n", encoding="utf-8"
    )

    result = CliRunner().invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "users" / "bind.py").exists()


def test_bare_invocation_runs_glob_mode(tmp_path: Path) -> None:
    workspace = tmp_path / "workspace"
    _write_tree(workspace / "schema" / "project")
    (workspace / "src" / "project").mkdir(parents=True)

    result = CliRunner().invoke(cli, [], env={SEARCH_ROOTS_ENV_VAR: str(workspace)})

    assert result.exit_code == 0, result.output
    assert "generated:" in result.output
    assert _asset_names(workspace / "src" / "project" / "schema.py") == ["create", "list"]


def test_bare_invocation_forwards_separate_to_glob_mode(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    workspace = tmp_path / "workspace"
    _write_tree(workspace / "schema" / "project")
    (workspace / "src" / "project").mkdir(parents=True)
    monkeypatch.setenv(SEARCH_ROOTS_ENV_VAR, str(workspace))

    exit_code = main(["--separate"])
    captured = capsys.readouterr()

    assert exit_code == 0, captured.err
    assert _asset_names(workspace / "src" / "project" / "users" / "schema.py") == ["create"]
    assert _asset_names(workspace / "src" / "project" / "orders" / "schema.py") == ["list"]
    assert not (workspace / "src" / "project" / "schema.py").exists()


def test_glob_mode_reports_failure_after_running_all_units(
    tmp_path: Path, monkeypatch, capsys
) -> None:
    good = tmp_path / "good"
    _write_tree(good / "schema" / "project")
    (good / "src" / "project").mkdir(parents=True)
    bad = tmp_path / "bad"
    _write_json(bad / "schema" / "project" / "svc" / "m.json", {"$ref": "#/definitions/id"})
    (bad / "src" / "project").mkdir(parents=True)
    monkeypatch.setenv(SEARCH_ROOTS_ENV_VAR, os.pathsep.join([str(bad), str(good)]))

    exit_code = main(["glob", "--separate"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Missing definitions" in captured.err
    assert (good / "src" / "project" / "users" / "schema.py").exists()


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    output_path = tmp_path / "schema-embedder.yaml"

    result = CliRunner().invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
