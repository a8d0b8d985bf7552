"""Definition pool entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class DefinitionPool:
    """Named schema fragments available for injection within one scope."""

    source: Path
    definitions: Mapping[str, Any]

    @property
    def is_empty(self) -> bool:
        return not self.definitions

    def __contains__(self, name: object) -> bool:
        return name in self.definitions
