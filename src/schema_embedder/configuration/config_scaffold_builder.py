"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-embedder.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-embedder.
# Relative paths are resolved against the directory holding this file.
# Command line options override the values below.

generation:
  # Directory tree of JSON schemas; definitions.json at its root is the shared pool.
  input: "schema"
  # Directory receiving the generated schema.py and bind.py modules.
  output: "generated"
  # true: one service per schema directory. false: one service named after output.
  separate: false
  # Parallel emission workers (defaults to the CPU count).
  # workers: 4

glob:
  # Roots searched by glob mode; SCHEMA_EMBEDDER_PATH overrides this list.
  search_roots: []
  # Under each root, schemas live in schema_dir and mirror into source_dir.
  schema_dir: "schema"
  source_dir: "src"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
