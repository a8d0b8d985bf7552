"""Generated module rendering for embedded schemas and their loader."""

from __future__ import annotations

import base64
import gzip
import json
from collections.abc import Iterable
from pathlib import Path
from string import Template

from .constants import ARTIFACT_FILENAME, BASE64_LINE_WIDTH, LOADER_FILENAME


class EmissionError(Exception):
    """Raised when generated modules cannot be written."""


_ARTIFACT_TEMPLATE = Template('''"""Embedded JSON schemas for service ${service_literal}.

Generated by schema-embedder. Do not edit.
"""

import base64
import gzip

_bindata = {
${entries}}


def asset(name):
    """Return the JSON bytes stored under name."""
    return gzip.decompress(base64.b64decode(_bindata[name]))


def asset_names():
    """Return the stored names in sorted order."""
    return sorted(_bindata)
''')

_LOADER_TEMPLATE = Template('''"""Parsed JSON schemas embedded for service ${service_literal}.

Generated by schema-embedder. Do not edit.
"""

import json

from .schema import _bindata, asset

SERVICE = ${service_literal}

SCHEMAS = {}


def _load():
    for name in sorted(_bindata):
        try:
            SCHEMAS[name] = json.loads(asset(name))
        except (ValueError, OSError, EOFError) as exc:
            raise RuntimeError("%s: %s" % (SERVICE, exc)) from exc


_load()
''')


def render_artifact(service: str, entries: Iterable[tuple[str, bytes]]) -> str:
    """Render the data module; entries are emitted sorted by key."""
    rendered_entries = "".join(
        _render_entry(key, payload) for key, payload in sorted(entries, key=lambda item: item[0])
    )
    return _ARTIFACT_TEMPLATE.substitute(
        service_literal=json.dumps(service), entries=rendered_entries
    )


def render_loader(service: str) -> str:
    return _LOADER_TEMPLATE.substitute(service_literal=json.dumps(service))


def emit_artifact(
    service: str, entries: Iterable[tuple[str, bytes]], output_dir: Path | str
) -> Path:
    """Write the data module for one service and return its path."""
    return _write_module(Path(output_dir) / ARTIFACT_FILENAME, render_artifact(service, entries))


def emit_loader(service: str, output_dir: Path | str) -> Path:
    """Write the loader module for one service and return its path."""
    return _write_module(Path(output_dir) / LOADER_FILENAME, render_loader(service))


def _render_entry(key: str, payload: bytes) -> str:
    encoded = base64.b64encode(gzip.compress(payload, mtime=0)).decode("ascii")
    lines = [
        encoded[start : start + BASE64_LINE_WIDTH]
        for start in range(0, len(encoded), BASE64_LINE_WIDTH)
    ]
    body = "".join(f'        "{line}"\n' for line in lines)
    return f"    {json.dumps(key)}: (\n{body}    ),\n"


def _write_module(destination: Path, source: str) -> Path:
    try:
        destination.write_text(source, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise EmissionError(f"Cannot write generated module {destination}: {exc}") from exc
    return destination
