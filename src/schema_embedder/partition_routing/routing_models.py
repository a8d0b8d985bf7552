"""Partition routing entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RoutingPolicy(str, Enum):
    """How resolved schemas are grouped into services."""

    SEPARATE = "separate"
    MERGE = "merge"

    @staticmethod
    def from_separate_flag(separate: bool) -> RoutingPolicy:
        return RoutingPolicy.SEPARATE if separate else RoutingPolicy.MERGE


@dataclass(frozen=True)
class RoutedSchema:
    """Placement of one resolved schema payload."""

    origin_path: Path
    service: str
    key: str
