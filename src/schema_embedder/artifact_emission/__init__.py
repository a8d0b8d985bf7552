"""Artifact emission exports."""

from .constants import ARTIFACT_FILENAME, LOADER_FILENAME
from .emission_models import EmittedService
from .module_writer import (
    EmissionError,
    emit_artifact,
    emit_loader,
    render_artifact,
    render_loader,
)
from .service_emitter import emit_services, service_output_dir

__all__ = [
    "ARTIFACT_FILENAME",
    "LOADER_FILENAME",
    "EmissionError",
    "EmittedService",
    "emit_artifact",
    "emit_loader",
    "emit_services",
    "render_artifact",
    "render_loader",
    "service_output_dir",
]
