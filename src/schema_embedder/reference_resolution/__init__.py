"""Reference resolution exports."""

from .closure_resolver import (
    PoolUnusableError,
    ResolutionError,
    UnknownDefinitionError,
    resolve_closure,
)
from .reference_scanner import REF_KEY, scan_references

__all__ = [
    "REF_KEY",
    "PoolUnusableError",
    "ResolutionError",
    "UnknownDefinitionError",
    "resolve_closure",
    "scan_references",
]
