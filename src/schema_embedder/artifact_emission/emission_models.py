"""Artifact emission entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EmittedService:
    """Generated modules for one service."""

    service: str
    output_dir: Path
    artifact_path: Path
    loader_path: Path
    keys: tuple[str, ...]
