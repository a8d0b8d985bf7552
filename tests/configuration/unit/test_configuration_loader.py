"""Configuration loader tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from schema_embedder.configuration import (
    SEARCH_ROOTS_ENV_VAR,
    GlobSettings,
    load_glob_settings,
)
from schema_embedder.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_relative_to_file(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "schema-embedder.yaml",
        """
generation:
  input: schemas
  output: /abs/generated
  separate: true
  workers: 3
glob:
  search_roots:
    - roots/one
    - " "
  schema_dir: json
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.generation.input_dir == (tmp_path / "schemas").resolve()
    assert configuration.generation.output_dir == Path("/abs/generated")
    assert configuration.generation.separate is True
    assert configuration.generation.workers == 3
    assert configuration.glob.search_roots == ((tmp_path / "roots" / "one").resolve(),)
    assert configuration.glob.schema_dirname == "json"
    assert configuration.glob.source_dirname == "src"


def test_json_configuration_and_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.json", json.dumps({"generation": {}}))

    configuration = load_configuration(config_path)

    assert configuration.generation.input_dir is None
    assert configuration.generation.separate is False
    assert configuration.generation.workers is None
    assert configuration.glob == GlobSettings()


def test_empty_file_is_an_empty_configuration(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "config.yaml", ""))

    assert configuration.generation.output_dir is None


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("[]", "Configuration root must be a mapping"),
        ("generation: []", "'generation' must be a mapping"),
        ("generation: {separate: 'yes'}", "generation.separate must be a boolean"),
        ("generation: {workers: 0}", "generation.workers must be greater than zero"),
        ("generation: {workers: true}", "generation.workers must be an integer"),
        ("generation: {input: ' '}", "generation.input must not be empty"),
        ("glob: {search_roots: 5}", "glob.search_roots must be a string or list"),
        ("glob: {search_roots: [1]}", "glob.search_roots entries must be strings"),
        ("glob: {schema_dir: ''}", "glob.schema_dir must not be empty"),
        ("generation: [unclosed", "Failed to parse configuration file"),
    ],
)
def test_rejects_invalid_configuration(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_errors_when_configuration_file_is_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")


def test_environment_search_roots_override_configured_roots() -> None:
    configured = GlobSettings(search_roots=(Path("/configured"),), schema_dirname="json")
    environ = {SEARCH_ROOTS_ENV_VAR: os.pathsep.join(["/first", "", "/second"])}

    settings = load_glob_settings(environ, configured)

    assert settings.search_roots == (Path("/first"), Path("/second"))
    assert settings.schema_dirname == "json"


def test_configured_roots_apply_when_environment_is_unset() -> None:
    configured = GlobSettings(search_roots=(Path("/configured"),))

    assert load_glob_settings({}, configured) == configured
    assert load_glob_settings({}) == GlobSettings()
