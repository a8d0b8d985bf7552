"""Transient per-service storage for resolved schema payloads."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Protocol

_LOGGER = logging.getLogger(__name__)

TEMP_DIR_PREFIX = "schema_bin"


class BlobStore(Protocol):
    """Storage contract used by the router and the emitters."""

    def store(self, service: str, key: str, payload: bytes) -> None: ...

    def services(self) -> list[str]: ...

    def entries(self, service: str) -> list[tuple[str, bytes]]: ...


class TempDirBlobStore:
    """Stores each payload as a file inside one temporary directory per service.

    A later payload stored under an existing (service, key) pair replaces the
    earlier one.
    """

    def __init__(self, temp_root: Path | str | None = None) -> None:
        self._temp_root = None if temp_root is None else str(temp_root)
        self._service_dirs: dict[str, Path] = {}

    def store(self, service: str, key: str, payload: bytes) -> None:
        service_dir = self._service_dirs.get(service)
        if service_dir is None:
            service_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=self._temp_root))
            self._service_dirs[service] = service_dir
        (service_dir / key).write_bytes(payload)

    def services(self) -> list[str]:
        return sorted(self._service_dirs)

    def entries(self, service: str) -> list[tuple[str, bytes]]:
        service_dir = self._service_dirs[service]
        return [(path.name, path.read_bytes()) for path in sorted(service_dir.iterdir())]

    def cleanup(self) -> None:
        """Remove every temporary directory; failures are logged and otherwise ignored."""
        for service, service_dir in self._service_dirs.items():
            try:
                shutil.rmtree(service_dir)
            except OSError as exc:
                _LOGGER.warning(
                    "cannot remove tmp dir %s for service %s: %s", service_dir, service, exc
                )
        self._service_dirs = {}
