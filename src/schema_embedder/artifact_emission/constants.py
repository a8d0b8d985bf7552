"""Shared artifact emission constants."""

from __future__ import annotations

ARTIFACT_FILENAME = "schema.py"
LOADER_FILENAME = "bind.py"

BASE64_LINE_WIDTH = 76
