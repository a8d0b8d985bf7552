"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from schema_embedder.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    load_glob_settings,
    write_placeholder_configuration,
)
from schema_embedder.generation_run import (
    GenerationError,
    GenerationRequest,
    UnitStatus,
    discover_glob_units,
    generate_schemas,
    run_glob_generation,
)
from schema_embedder.partition_routing import RoutingPolicy

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


_config_option = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON schema-embedder configuration file",
)
_separate_option = click.option(
    "--separate",
    is_flag=True,
    default=False,
    help="Generate one service per schema directory instead of one merged service.",
)
_workers_option = click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of parallel workers (defaults to the CPU count).",
)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(package_name="schema-embedder")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
@click.option(
    "--separate",
    is_flag=True,
    default=False,
    help="With no command, run glob mode with one service per schema directory.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, separate: bool) -> None:
    """Embed JSON schemas with resolved definitions into generated Python modules.

    Without a command, runs glob mode over the roots listed in SCHEMA_EMBEDDER_PATH;
    `--separate` is forwarded to it.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        ctx.invoke(glob_command, separate=separate)


@cli.command(name="generate")
@click.option(
    "--input",
    "input_dir",
    required=False,
    type=click.Path(path_type=str),
    help="JSON schema input directory",
)
@click.option(
    "--output",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Generated Python modules output directory",
)
@_separate_option
@_workers_option
@_config_option
def generate(
    input_dir: str | None,
    output_dir: str | None,
    separate: bool,
    workers: int | None,
    config_path: str | None,
) -> None:
    """Generate embedded schema modules for one input directory."""
    configuration = _load_optional_configuration(config_path)
    settings = configuration.generation
    resolved_input = Path(input_dir) if input_dir else settings.input_dir
    resolved_output = Path(output_dir) if output_dir else settings.output_dir
    if resolved_input is None or resolved_output is None:
        raise click.UsageError("Both --input and --output are required.")

    request = GenerationRequest(
        input_dir=resolved_input,
        output_dir=resolved_output,
        policy=RoutingPolicy.from_separate_flag(separate or settings.separate),
        max_workers=workers or settings.workers,
    )
    try:
        outcome = generate_schemas(request)
    except GenerationError as exc:
        raise CliError(str(exc)) from exc
    for service in outcome.services:
        click.echo(f"{service}: {outcome.output_dir}")


@cli.command(name="glob")
@_separate_option
@_workers_option
@_config_option
def glob_command(
    separate: bool = False,
    workers: int | None = None,
    config_path: str | None = None,
) -> None:
    """Generate every schema tree mirrored under the configured search roots."""
    configuration = _load_optional_configuration(config_path)
    glob_settings = load_glob_settings(configured=configuration.glob)
    units = discover_glob_units(glob_settings)
    outcomes = run_glob_generation(
        units,
        policy=RoutingPolicy.from_separate_flag(separate or configuration.generation.separate),
        max_workers=workers or configuration.generation.workers,
    )
    last_error: str | None = None
    for outcome in outcomes:
        if outcome.status is UnitStatus.FAILED:
            last_error = outcome.error_message
            click.echo(f"failed: {outcome.unit.input_dir}: {outcome.error_message}", err=True)
        else:
            click.echo(f"generated: {outcome.unit.output_dir}")
    if last_error is not None:
        raise CliError(last_error)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _load_optional_configuration(config_path: str | None) -> Configuration:
    if not config_path:
        return Configuration(path=None)
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
