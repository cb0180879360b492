"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from cog_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from cog_schema.diagnostics import Diagnostic, DiagnosticCollector
from cog_schema.merge_execution import MergeExecutionError, MergeRequest, execute_schema_merge
from cog_schema.meta_schema import MetaSchemaError, ensure_meta_schema
from cog_schema.schema_loading import expand_schema_patterns


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="cog-schema")
def cli() -> None:
    """Component schema merge utility."""


@cli.command(name="merge")
@click.argument("patterns", nargs=-1)
@click.option(
    "-o",
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path and filename for the merged schema [default: app.schema]",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON merge configuration file",
)
@click.option(
    "--meta-schema-cache",
    "cache_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path of the cached meta-schema to use or build",
)
@click.option("--verbose", is_flag=True, default=False, help="Log progress while merging.")
def merge(
    patterns: tuple[str, ...],
    output_path: str | None,
    config_path: str | None,
    cache_path: str | None,
    verbose: bool,
) -> None:
    """Merge component .schema files matching PATTERNS into one schema.

    External $ref targets are inlined, allOf is merged and $implements
    registers components in the oneOf of their union types.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    configuration = _load_configuration(config_path)
    if patterns:
        schema_paths = expand_schema_patterns(patterns)
    else:
        schema_paths = expand_schema_patterns(configuration.merge.inputs)
    if not schema_paths:
        raise click.UsageError("No schema files match the given patterns.")

    destination = Path(output_path) if output_path else configuration.merge.output_path
    try:
        meta_schema = ensure_meta_schema(
            Path(cache_path) if cache_path else configuration.meta_schema.cache_path,
            timeout_seconds=configuration.meta_schema.timeout_seconds,
        )
        outcome = execute_schema_merge(
            MergeRequest(
                schema_paths=tuple(schema_paths),
                output_path=destination,
                meta_schema=meta_schema,
            ),
            diagnostics=DiagnosticCollector(listener=_echo_diagnostic),
        )
    except (MetaSchemaError, MergeExecutionError) as exc:
        raise CliError(str(exc)) from exc

    if not outcome.written:
        raise CliError("Could not merge schemas")
    click.echo(f"Writing {outcome.output_path}")


@cli.command(name="meta-schema")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON merge configuration file",
)
@click.option(
    "--meta-schema-cache",
    "cache_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path of the cached meta-schema to build",
)
@click.option(
    "--rebuild",
    is_flag=True,
    default=False,
    help="Rebuild the cached meta-schema even when it already exists.",
)
def meta_schema(config_path: str | None, cache_path: str | None, rebuild: bool) -> None:
    """Build the cached meta-schema if needed and print its location."""
    configuration = _load_configuration(config_path)
    destination = Path(cache_path) if cache_path else configuration.meta_schema.cache_path
    try:
        ensure_meta_schema(
            destination,
            timeout_seconds=configuration.meta_schema.timeout_seconds,
            rebuild=rebuild,
        )
    except MetaSchemaError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML merge configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a merge configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _load_configuration(config_path: str | None) -> Configuration:
    if not config_path:
        return default_configuration()
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _echo_diagnostic(diagnostic: Diagnostic) -> None:
    click.secho(diagnostic.message, fg="bright_red")


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
