"""Minimal definitions closure extraction."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from schema_embedder.definition_pool.pool_models import DefinitionPool


class ResolutionError(Exception):
    """Raised when referenced definitions cannot be supplied."""


class PoolUnusableError(ResolutionError):
    """Raised when definitions are referenced but the active pool is absent or empty."""


class UnknownDefinitionError(ResolutionError):
    """Raised for the first referenced name the pool does not define."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing definition {name}")
        self.name = name


def resolve_closure(pool: DefinitionPool | None, names: Iterable[str]) -> dict[str, Any]:
    """Extract exactly the requested definitions from the pool.

    Each value is a deep copy of the pool entry. Refs inside the copied
    definitions are left as they are.
    """
    requested = list(names)
    if not requested:
        return {}
    if pool is None or pool.is_empty:
        raise PoolUnusableError("Missing definitions: no definitions available in this scope")

    closure: dict[str, Any] = {}
    for name in requested:
        if name not in pool:
            raise UnknownDefinitionError(name)
        if name not in closure:
            closure[name] = copy.deepcopy(pool.definitions[name])
    return closure
