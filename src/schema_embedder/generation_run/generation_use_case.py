"""Single-tree generation use-case service."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from schema_embedder.artifact_emission import EmissionError, emit_services
from schema_embedder.definition_pool import (
    DEFINITIONS_FILENAME,
    DefinitionPool,
    DefinitionPoolError,
    DefinitionsNotFoundError,
    load_definition_pool,
)
from schema_embedder.partition_routing import PartitionRouter, TempDirBlobStore
from schema_embedder.reference_resolution import ResolutionError
from schema_embedder.schema_management import SchemaError
from schema_embedder.scope_walking import walk_schema_tree

from .run_contracts import GenerationOutcome, GenerationRequest

_LOGGER = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a generation run cannot be completed."""


def generate_schemas(
    request: GenerationRequest, *, temp_root: Path | str | None = None
) -> GenerationOutcome:
    """Resolve every schema under the input tree and emit one module pair per service.

    The declared package name used by the merge policy is the output
    directory's name. Temporary storage is removed whether or not the run
    succeeds.
    """
    input_dir = Path(os.path.abspath(request.input_dir))
    output_dir = Path(os.path.abspath(request.output_dir))
    if not input_dir.is_dir():
        raise GenerationError(f"Input directory not found: {input_dir}")

    pool = _load_ambient_pool(input_dir)
    store = TempDirBlobStore(temp_root)
    router = PartitionRouter(policy=request.policy, package=output_dir.name, store=store)
    try:
        report = walk_schema_tree(input_dir, router, pool=pool)
        emitted = emit_services(
            store, output_dir, policy=request.policy, max_workers=request.max_workers
        )
    except (ResolutionError, SchemaError, EmissionError, OSError) as exc:
        raise GenerationError(str(exc)) from exc
    finally:
        store.cleanup()

    return GenerationOutcome(
        output_dir=output_dir,
        services=tuple(service.service for service in emitted),
        schema_count=len(report.routed),
        shadowed_roots=report.shadowed_roots,
    )


def _load_ambient_pool(input_dir: Path) -> DefinitionPool | None:
    try:
        return load_definition_pool(input_dir / DEFINITIONS_FILENAME)
    except DefinitionsNotFoundError as exc:
        _LOGGER.warning(
            "cannot read %s, continuing without definitions: %s", DEFINITIONS_FILENAME, exc
        )
        return None
    except DefinitionPoolError as exc:
        raise GenerationError(str(exc)) from exc
