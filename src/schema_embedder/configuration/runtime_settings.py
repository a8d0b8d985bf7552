"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SCHEMA_DIRNAME = "schema"
DEFAULT_SOURCE_DIRNAME = "src"


@dataclass(frozen=True)
class GenerationSettings:
    """Single-tree generation settings."""

    input_dir: Path | None = None
    output_dir: Path | None = None
    separate: bool = False
    workers: int | None = None


@dataclass(frozen=True)
class GlobSettings:
    """Multi-root discovery settings."""

    search_roots: tuple[Path, ...] = ()
    schema_dirname: str = DEFAULT_SCHEMA_DIRNAME
    source_dirname: str = DEFAULT_SOURCE_DIRNAME


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    generation: GenerationSettings = field(default_factory=GenerationSettings)
    glob: GlobSettings = field(default_factory=GlobSettings)
