"""Definitions file loading service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from .pool_models import DefinitionPool

DEFINITIONS_FILENAME = "definitions.json"


class DefinitionPoolError(Exception):
    """Base class for definitions file failures."""


class DefinitionsNotFoundError(DefinitionPoolError):
    """Raised when no definitions file exists; callers may continue without a pool."""


class DefinitionsParseError(DefinitionPoolError):
    """Raised when the definitions file is not valid JSON."""


class MissingDefinitionsKeyError(DefinitionPoolError):
    """Raised when the definitions file lacks a top-level `definitions` object."""


def load_definition_pool(path: Path | str) -> DefinitionPool:
    """Load the pool from one definitions file.

    Args:
      path: Location of a file shaped as `{"definitions": {name: schema, ...}}`.

    Returns:
      The fully loaded pool.

    Raises:
      DefinitionsNotFoundError: If the file does not exist.
      DefinitionsParseError: If the file is not valid UTF-8 JSON.
      MissingDefinitionsKeyError: If the `definitions` object is missing or malformed.
    """
    source = Path(path)
    try:
        raw = source.read_bytes()
    except FileNotFoundError as exc:
        raise DefinitionsNotFoundError(f"Definitions file not found: {source}") from exc

    try:
        parsed = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DefinitionsParseError(f"Invalid definitions file {source}: {exc}") from exc

    definitions = parsed.get("definitions") if isinstance(parsed, Mapping) else None
    if not isinstance(definitions, Mapping):
        raise MissingDefinitionsKeyError(
            f"Invalid {source.name} file format (missing definitions): {source}"
        )
    return DefinitionPool(source=source, definitions=dict(definitions))
