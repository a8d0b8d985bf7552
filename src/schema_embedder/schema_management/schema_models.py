"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed schema file prior to definitions injection."""

    path: Path
    root: dict[str, Any]

    @property
    def base_name(self) -> str:
        return self.path.name.removesuffix(".json")
