"""Service assignment for resolved schemas."""

from __future__ import annotations

import logging
from pathlib import Path

from .blob_store import BlobStore
from .routing_models import RoutedSchema, RoutingPolicy

_LOGGER = logging.getLogger(__name__)

SCHEMA_SUFFIX = ".json"


class PartitionRouter:
    """Files resolved payloads under their service in a blob store.

    Under the separate policy the service is the name of the schema's parent
    directory, so same-named directories in different places share a service.
    Under the merge policy every schema of the run goes to `package`.
    """

    def __init__(self, *, policy: RoutingPolicy, package: str, store: BlobStore) -> None:
        self._policy = policy
        self._package = package
        self._store = store
        self._routed: list[RoutedSchema] = []

    @property
    def routed(self) -> tuple[RoutedSchema, ...]:
        return tuple(self._routed)

    def service_for(self, origin_path: Path) -> str:
        if self._policy is RoutingPolicy.MERGE:
            return self._package
        return origin_path.parent.name

    def route(self, origin_path: Path | str, payload: bytes) -> RoutedSchema:
        origin = Path(origin_path)
        placement = RoutedSchema(
            origin_path=origin,
            service=self.service_for(origin),
            key=origin.name.removesuffix(SCHEMA_SUFFIX),
        )
        self._store.store(placement.service, placement.key, payload)
        self._routed.append(placement)
        _LOGGER.debug("routed %s to %s/%s", origin, placement.service, placement.key)
        return placement
