"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    SEARCH_ROOTS_ENV_VAR,
    ConfigurationError,
    load_configuration,
    load_glob_settings,
)
from .runtime_settings import Configuration, GenerationSettings, GlobSettings

__all__ = [
    "Configuration",
    "GenerationSettings",
    "GlobSettings",
    "ConfigurationError",
    "SEARCH_ROOTS_ENV_VAR",
    "load_configuration",
    "load_glob_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
