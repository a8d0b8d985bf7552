"""Multi-root discovery and parallel generation of independent trees."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path

from schema_embedder.configuration.runtime_settings import GlobSettings
from schema_embedder.definition_pool import DEFINITIONS_FILENAME
from schema_embedder.partition_routing import RoutingPolicy

from .generation_use_case import GenerationError, generate_schemas
from .run_contracts import GenerationOutcome, GenerationRequest, GlobUnit, UnitOutcome

_LOGGER = logging.getLogger(__name__)

Generator = Callable[[GenerationRequest], GenerationOutcome]


def discover_glob_units(settings: GlobSettings) -> list[GlobUnit]:
    """Return the trees glob mode generates, in a stable order.

    For each search root the directory trees under its schema and source
    directories are intersected; the deepest common directories become units.
    A directory beneath a unit that owns its own definitions file becomes a
    unit as well, since the walk of the enclosing unit skips it. Schema files
    outside every unit, such as those in an intermediate common directory, are
    not generated and are reported with a warning.
    """
    units: list[GlobUnit] = []
    for root in settings.search_roots:
        schema_base = root / settings.schema_dirname
        source_base = root / settings.source_dirname
        if not schema_base.is_dir() or not source_base.is_dir():
            _LOGGER.debug("skipping search root %s: missing schema or source tree", root)
            continue
        common = _relative_dirs(schema_base) & _relative_dirs(source_base)
        root_units: list[GlobUnit] = []
        for relative in sorted(_deepest(common)):
            root_units.append(
                GlobUnit(input_dir=schema_base / relative, output_dir=source_base / relative)
            )
            for scoped in _scoped_subtrees(schema_base / relative):
                root_units.append(
                    GlobUnit(
                        input_dir=scoped,
                        output_dir=source_base / scoped.relative_to(schema_base),
                    )
                )
        _warn_uncovered(schema_base, root_units)
        units.extend(root_units)
    return units


def run_glob_generation(
    units: Sequence[GlobUnit],
    *,
    policy: RoutingPolicy,
    max_workers: int | None = None,
    generator: Generator | None = None,
) -> tuple[UnitOutcome, ...]:
    """Generate every unit on a worker pool; a failed unit never stops the others."""
    if not units:
        return ()
    resolved_generator = generator or generate_schemas
    workers = min(max_workers or os.cpu_count() or 1, len(units))
    futures: list[tuple[GlobUnit, Future[UnitOutcome]]] = []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        for unit in units:
            request = GenerationRequest(
                input_dir=unit.input_dir,
                output_dir=unit.output_dir,
                policy=policy,
                max_workers=1,
            )
            future = executor.submit(_generate_unit, resolved_generator, unit, request)
            futures.append((unit, future))
        wait([future for _, future in futures])
    return tuple(future.result() for _, future in futures)


def _generate_unit(generator: Generator, unit: GlobUnit, request: GenerationRequest) -> UnitOutcome:
    try:
        return UnitOutcome.succeeded(unit, generator(request))
    except GenerationError as exc:
        _LOGGER.error("generation failed for %s: %s", unit.input_dir, exc)
        return UnitOutcome.failed(unit, exc)


def _relative_dirs(base: Path) -> set[Path]:
    found = {Path(".")}
    for dirpath, dirnames, _ in os.walk(base):
        for name in dirnames:
            found.add((Path(dirpath) / name).relative_to(base))
    return found


def _deepest(paths: set[Path]) -> set[Path]:
    ancestors = {parent for path in paths for parent in path.parents}
    return paths - ancestors


def _scoped_subtrees(unit_root: Path) -> list[Path]:
    scoped: list[Path] = []
    for dirpath, dirnames, _ in os.walk(unit_root):
        dirnames.sort()
        directory = Path(dirpath)
        if directory != unit_root and (directory / DEFINITIONS_FILENAME).exists():
            scoped.append(directory)
    return scoped


def _warn_uncovered(schema_base: Path, units: Sequence[GlobUnit]) -> None:
    unit_roots = [unit.input_dir for unit in units]
    for dirpath, dirnames, filenames in os.walk(schema_base):
        dirnames.sort()
        directory = Path(dirpath)
        if any(directory == root or root in directory.parents for root in unit_roots):
            continue
        for name in sorted(filenames):
            if name.endswith(".json") and name != DEFINITIONS_FILENAME:
                _LOGGER.warning(
                    "%s is outside every generated tree and will not be embedded",
                    directory / name,
                )
