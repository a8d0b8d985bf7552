"""Depth-first traversal of a schema tree under one definitions scope."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from schema_embedder.definition_pool import DEFINITIONS_FILENAME, DefinitionPool
from schema_embedder.partition_routing import PartitionRouter, RoutedSchema
from schema_embedder.reference_resolution import resolve_closure, scan_references
from schema_embedder.schema_management import (
    ensure_definitions_free,
    inject_definitions,
    load_schema_document,
    serialize_resolved_schema,
)

from .walk_models import WalkReport, WalkScope

_LOGGER = logging.getLogger(__name__)

SCHEMA_SUFFIX = ".json"


def walk_schema_tree(
    root: Path | str, router: PartitionRouter, *, pool: DefinitionPool | None
) -> WalkReport:
    """Resolve and route every schema file beneath root against the ambient pool.

    A subdirectory holding its own definitions file starts a separate scope and
    is pruned from this walk entirely, including everything beneath it. Any
    read, parse or resolution failure propagates and ends the walk.
    """
    scope = WalkScope(root=Path(root), pool=pool)
    routed: list[RoutedSchema] = []
    shadowed: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(scope.root, topdown=True, onerror=_raise):
        directory = Path(dirpath)
        kept: list[str] = []
        for name in sorted(dirnames):
            child = directory / name
            if _owns_definitions(child):
                _LOGGER.info("skipping %s: it has its own %s", child, DEFINITIONS_FILENAME)
                shadowed.append(child)
            else:
                kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            if name == DEFINITIONS_FILENAME or not name.endswith(SCHEMA_SUFFIX):
                continue
            routed.append(resolve_schema_file(directory / name, router, pool=scope.pool))

    return WalkReport(scope=scope, routed=tuple(routed), shadowed_roots=tuple(shadowed))


def resolve_schema_file(
    path: Path, router: PartitionRouter, *, pool: DefinitionPool | None
) -> RoutedSchema:
    """Inject the minimal definitions closure into one schema file and route it."""
    document = load_schema_document(path)
    ensure_definitions_free(document)
    closure = resolve_closure(pool, scan_references(document.root))
    resolved = inject_definitions(document, closure)
    return router.route(path, serialize_resolved_schema(resolved))


def _owns_definitions(directory: Path) -> bool:
    return os.path.lexists(directory / DEFINITIONS_FILENAME)


def _raise(error: OSError) -> None:
    raise error
