"""Generation run domain exports."""

from .generation_use_case import GenerationError, generate_schemas
from .glob_discovery import discover_glob_units, run_glob_generation
from .run_contracts import GenerationOutcome, GenerationRequest, GlobUnit, UnitOutcome, UnitStatus

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationError",
    "GlobUnit",
    "UnitOutcome",
    "UnitStatus",
    "discover_glob_units",
    "generate_schemas",
    "run_glob_generation",
]
