"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from schema_embedder.partition_routing.routing_models import RoutingPolicy


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one schema tree."""

    input_dir: Path | str
    output_dir: Path | str
    policy: RoutingPolicy = RoutingPolicy.MERGE
    max_workers: int | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation."""

    output_dir: Path
    services: tuple[str, ...]
    schema_count: int
    shadowed_roots: tuple[Path, ...]


@dataclass(frozen=True)
class GlobUnit:
    """One independently generated tree discovered in glob mode."""

    input_dir: Path
    output_dir: Path


class UnitStatus(str, Enum):
    """Glob unit outcome status."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class UnitOutcome:
    """Outcome of generating one glob unit."""

    unit: GlobUnit
    status: UnitStatus
    outcome: GenerationOutcome | None
    error_message: str | None

    @staticmethod
    def succeeded(unit: GlobUnit, outcome: GenerationOutcome) -> UnitOutcome:
        return UnitOutcome(
            unit=unit,
            status=UnitStatus.SUCCEEDED,
            outcome=outcome,
            error_message=None,
        )

    @staticmethod
    def failed(unit: GlobUnit, error: Exception) -> UnitOutcome:
        return UnitOutcome(
            unit=unit,
            status=UnitStatus.FAILED,
            outcome=None,
            error_message=str(error),
        )
