"""Schema document parsing, injection and serialization."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .schema_models import SchemaDocument

RESERVED_DEFINITIONS_KEY = "definitions"


class SchemaError(Exception):
    """Raised for schema document failures."""


class SchemaParseError(SchemaError):
    """Raised when a schema file is not a JSON object."""


class SchemaHasDefinitionsError(SchemaError):
    """Raised when a schema already declares the reserved `definitions` key."""


def load_schema_document(path: Path | str) -> SchemaDocument:
    """Read one schema file into a document."""
    source = Path(path)
    raw = source.read_bytes()
    try:
        root = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SchemaParseError(f"Invalid schema file {source}: {exc}") from exc
    if not isinstance(root, dict):
        raise SchemaParseError(f"Schema file {source} must contain a JSON object.")
    return SchemaDocument(path=source, root=root)


def ensure_definitions_free(document: SchemaDocument) -> None:
    """Reject a document that already uses the reserved `definitions` key."""
    if RESERVED_DEFINITIONS_KEY in document.root:
        raise SchemaHasDefinitionsError(
            f'{document.path.name} file must not have "{RESERVED_DEFINITIONS_KEY}" field'
        )


def inject_definitions(
    document: SchemaDocument, closure: Mapping[str, Any]
) -> dict[str, Any]:
    """Return the document root with the closure placed under `definitions`."""
    ensure_definitions_free(document)
    resolved = dict(document.root)
    resolved[RESERVED_DEFINITIONS_KEY] = dict(closure)
    return resolved


def serialize_resolved_schema(resolved: Mapping[str, Any]) -> bytes:
    """Serialize compactly with sorted keys so identical input yields identical bytes."""
    text = json.dumps(resolved, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SchemaError(f"Cannot encode resolved schema as UTF-8: {exc}") from exc
