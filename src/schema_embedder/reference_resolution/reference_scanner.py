"""Local `$ref` discovery."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REF_KEY = "$ref"

_LOCAL_REF_ROOT = "#"
_LOCAL_REF_SECTION = "definitions"


def scan_references(document: Any) -> list[str]:
    """Return definition names referenced as `#/definitions/<name>` in the document.

    Only mapping values are descended into. Values nested inside arrays are not
    scanned, so a `$ref` placed in an array element is never collected. Any other
    `$ref` form is ignored. Duplicates are kept.
    """
    references: list[str] = []
    if isinstance(document, Mapping):
        _collect(document, references)
    return references


def _collect(node: Mapping[str, Any], references: list[str]) -> None:
    for key, value in node.items():
        if isinstance(value, Mapping):
            _collect(value, references)
        elif isinstance(value, str) and key == REF_KEY:
            name = _local_definition_name(value)
            if name is not None:
                references.append(name)


def _local_definition_name(ref: str) -> str | None:
    tokens = ref.split("/")
    if len(tokens) != 3:
        return None
    root, section, name = tokens
    if root != _LOCAL_REF_ROOT or section != _LOCAL_REF_SECTION:
        return None
    return name
