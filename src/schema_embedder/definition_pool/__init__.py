"""Definition pool exports."""

from .pool_loader import (
    DEFINITIONS_FILENAME,
    DefinitionPoolError,
    DefinitionsNotFoundError,
    DefinitionsParseError,
    MissingDefinitionsKeyError,
    load_definition_pool,
)
from .pool_models import DefinitionPool

__all__ = [
    "DEFINITIONS_FILENAME",
    "DefinitionPool",
    "DefinitionPoolError",
    "DefinitionsNotFoundError",
    "DefinitionsParseError",
    "MissingDefinitionsKeyError",
    "load_definition_pool",
]
