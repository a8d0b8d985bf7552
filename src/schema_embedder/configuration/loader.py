"""Configuration loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_SCHEMA_DIRNAME,
    DEFAULT_SOURCE_DIRNAME,
    Configuration,
    GenerationSettings,
    GlobSettings,
)

SEARCH_ROOTS_ENV_VAR = "SCHEMA_EMBEDDER_PATH"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        generation=_parse_generation_section(parsed.get("generation"), base_path),
        glob=_parse_glob_section(parsed.get("glob"), base_path),
    )


def load_glob_settings(
    environ: Mapping[str, str] | None = None, configured: GlobSettings | None = None
) -> GlobSettings:
    """Return glob settings, taking search roots from the environment when set.

    The environment variable holds an `os.pathsep` separated list; empty
    entries are ignored.
    """
    environment = os.environ if environ is None else environ
    base = configured or GlobSettings()
    raw = environment.get(SEARCH_ROOTS_ENV_VAR)
    if raw is None:
        return base
    roots = tuple(Path(entry) for entry in raw.split(os.pathsep) if entry)
    return GlobSettings(
        search_roots=roots,
        schema_dirname=base.schema_dirname,
        source_dirname=base.source_dirname,
    )


def _parse_generation_section(value: Any, base_path: Path) -> GenerationSettings:
    if value is None:
        return GenerationSettings()
    section = _require_mapping(value, "generation")
    input_dir = _optional_path(section.get("input"), "generation.input", base_path)
    output_dir = _optional_path(section.get("output"), "generation.output", base_path)
    separate = _optional_bool(section.get("separate"), "generation.separate")
    workers_raw = section.get("workers")
    workers = (
        None if workers_raw is None else _require_positive_int(workers_raw, "generation.workers")
    )
    return GenerationSettings(
        input_dir=input_dir,
        output_dir=output_dir,
        separate=separate,
        workers=workers,
    )


def _parse_glob_section(value: Any, base_path: Path) -> GlobSettings:
    if value is None:
        return GlobSettings()
    section = _require_mapping(value, "glob")
    search_roots = _normalize_search_roots(section.get("search_roots"), base_path)
    schema_dirname = _require_non_empty_string(
        section.get("schema_dir", DEFAULT_SCHEMA_DIRNAME), "glob.schema_dir"
    )
    source_dirname = _require_non_empty_string(
        section.get("source_dir", DEFAULT_SOURCE_DIRNAME), "glob.source_dir"
    )
    return GlobSettings(
        search_roots=search_roots,
        schema_dirname=schema_dirname,
        source_dirname=source_dirname,
    )


def _normalize_search_roots(value: Any, base_path: Path) -> tuple[Path, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError("glob.search_roots must be a string or list of strings.")
    roots: list[Path] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError("glob.search_roots entries must be strings.")
        stripped = item.strip()
        if stripped:
            roots.append(_resolve_path(base_path, stripped))
    return tuple(roots)


def _optional_path(value: Any, field_name: str, base_path: Path) -> Path | None:
    if value is None:
        return None
    return _resolve_path(base_path, _require_non_empty_string(value, field_name))


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
