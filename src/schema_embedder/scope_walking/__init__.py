"""Scope walking exports."""

from .scope_walker import resolve_schema_file, walk_schema_tree
from .walk_models import WalkReport, WalkScope

__all__ = ["WalkReport", "WalkScope", "resolve_schema_file", "walk_schema_tree"]
