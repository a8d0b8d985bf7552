"""Concurrent emission of generated modules across services."""

from __future__ import annotations

import os
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path

from schema_embedder.partition_routing import BlobStore, RoutingPolicy

from .emission_models import EmittedService
from .module_writer import EmissionError, emit_artifact, emit_loader


def service_output_dir(output_root: Path, service: str, policy: RoutingPolicy) -> Path:
    """Return where a service's modules are written.

    Merged runs and a service named after the output root write directly into
    the root; every other service gets a subdirectory of its own.
    """
    if policy is RoutingPolicy.MERGE or service == output_root.name:
        return output_root
    return output_root / service


def emit_services(
    store: BlobStore,
    output_root: Path | str,
    *,
    policy: RoutingPolicy,
    max_workers: int | None = None,
) -> tuple[EmittedService, ...]:
    """Emit data and loader modules for every stored service.

    Services are emitted in parallel. One service's failure does not stop the
    others; once all have finished the last failure is raised.
    """
    root = Path(output_root)
    services = store.services()
    if not services:
        return ()

    targets = {service: service_output_dir(root, service, policy) for service in services}
    for target in targets.values():
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise EmissionError(f"Cannot create output directory {target}: {exc}") from exc

    workers = min(max_workers or os.cpu_count() or 1, len(services))
    futures: dict[Future[EmittedService], str] = {}
    with ThreadPoolExecutor(max_workers=workers) as executor:
        for service in services:
            futures[executor.submit(_emit_service, store, service, targets[service])] = service
        wait(futures.keys())

    emitted: list[EmittedService] = []
    last_error: Exception | None = None
    for future in futures:
        try:
            emitted.append(future.result())
        except (EmissionError, OSError) as exc:
            last_error = exc
    if last_error is not None:
        if isinstance(last_error, EmissionError):
            raise last_error
        raise EmissionError(str(last_error)) from last_error
    return tuple(emitted)


def _emit_service(store: BlobStore, service: str, output_dir: Path) -> EmittedService:
    entries = store.entries(service)
    artifact_path = emit_artifact(service, entries, output_dir)
    loader_path = emit_loader(service, output_dir)
    return EmittedService(
        service=service,
        output_dir=output_dir,
        artifact_path=artifact_path,
        loader_path=loader_path,
        keys=tuple(key for key, _ in entries),
    )
