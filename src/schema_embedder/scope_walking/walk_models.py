"""Scope walking entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_embedder.definition_pool.pool_models import DefinitionPool
from schema_embedder.partition_routing.routing_models import RoutedSchema


@dataclass(frozen=True)
class WalkScope:
    """Subtree root and the pool active beneath it."""

    root: Path
    pool: DefinitionPool | None


@dataclass(frozen=True)
class WalkReport:
    """What one tree walk processed and what it left to separate invocations."""

    scope: WalkScope
    routed: tuple[RoutedSchema, ...]
    shadowed_roots: tuple[Path, ...]
