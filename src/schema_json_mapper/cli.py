"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from schema_json_mapper.codec_engine import JsonCodec
from schema_json_mapper.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    import_type,
    load_configuration,
    register_configured_types,
    write_placeholder_configuration,
)
from schema_json_mapper.mapping_errors import MappingError
from schema_json_mapper.path_resolution import resolve_path
from schema_json_mapper.schema_registry import SchemaRegistry, describe_type_tag


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-json-mapper")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Schema-driven JSON mapping utility."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="resolve")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON document to read",
)
@click.option(
    "--path",
    "expression",
    required=True,
    help="Path expression such as 'owner.tags[0]'",
)
def resolve(input_path: str, expression: str) -> None:
    """Print the JSON value addressed by a path expression."""
    try:
        document = _read_json(input_path)
        value = resolve_path(expression, document)
    except MappingError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(value, ensure_ascii=False))


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
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check-config")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON mapper configuration file",
)
def check_config(config_path: str) -> None:
    """Validate the configuration and list the resolved schema of every type."""
    registry = SchemaRegistry()
    try:
        configuration = load_configuration(config_path)
        registered = register_configured_types(configuration, registry)
    except (ConfigurationError, MappingError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"max_levels: {configuration.codec.max_levels}")
    for target_type in registered:
        click.echo(f"{target_type.__module__}.{target_type.__qualname__}")
        for descriptor in registry.schema_for(target_type):
            marker = " (required)" if descriptor.required else ""
            click.echo(f"  {descriptor.name}: {describe_type_tag(descriptor.type)}{marker}")


@cli.command(name="convert")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON mapper configuration file",
)
@click.option(
    "--type",
    "type_name",
    required=True,
    help="Configured class to decode the document into (package.module.ClassName)",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON document to convert",
)
def convert(config_path: str, type_name: str, input_path: str) -> None:
    """Decode a JSON document into a configured type and print it re-encoded."""
    registry = SchemaRegistry()
    try:
        configuration = load_configuration(config_path)
        register_configured_types(configuration, registry)
        target_type = import_type(type_name)
    except (ConfigurationError, MappingError) as exc:
        raise CliError(str(exc)) from exc
    document = _read_json(input_path)
    codec = JsonCodec.from_settings(configuration.codec, registry)
    try:
        instance = codec.deserialize(document, target_type)
        encoded = codec.serialize(instance)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise CliError(f"Conversion to {type_name} failed: {type(exc).__name__}: {exc}") from exc
    click.echo(json.dumps(encoded, ensure_ascii=False, indent=2))


def _read_json(input_path: str) -> Any:
    path = Path(input_path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CliError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CliError(f"Invalid JSON in {path}: {exc}") from exc


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
