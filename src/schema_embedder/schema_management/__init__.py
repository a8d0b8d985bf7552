"""Schema management exports."""

from .schema_documents import (
    RESERVED_DEFINITIONS_KEY,
    SchemaError,
    SchemaHasDefinitionsError,
    SchemaParseError,
    ensure_definitions_free,
    inject_definitions,
    load_schema_document,
    serialize_resolved_schema,
)
from .schema_models import SchemaDocument

__all__ = [
    "RESERVED_DEFINITIONS_KEY",
    "SchemaDocument",
    "SchemaError",
    "SchemaHasDefinitionsError",
    "SchemaParseError",
    "ensure_definitions_free",
    "inject_definitions",
    "load_schema_document",
    "serialize_resolved_schema",
]
