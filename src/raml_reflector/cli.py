"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from raml_reflector.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from raml_reflector.generation import (
    GenerationOutcome,
    GenerationRequest,
    GenerationRunError,
    execute_generation,
    generate_document,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="raml-reflector")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Infer RAML types from Python values and merge them into a RAML template."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the merged RAML document, overrides the configured output",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    default=False,
    help="Print the merged RAML document instead of writing it.",
)
def generate(config_path: str, output_path: str | None, to_stdout: bool) -> None:
    """Merge inferred types of the configured values into the configured template."""
    try:
        outcome = execute_generation(
            GenerationRequest(
                config_path=config_path,
                output_path=output_path,
                write_output=not to_stdout,
            )
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    _echo_outcome(outcome)


@cli.command(name="infer")
@click.option(
    "--template",
    "template_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to the RAML template",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the merged RAML document; printed to stdout when omitted",
)
@click.argument("values", nargs=-1, required=True)
def infer(template_path: Path, output_path: str | None, values: tuple[str, ...]) -> None:
    """Merge inferred types of VALUES ('module:attribute' references) into a template."""
    try:
        template_text = template_path.read_text(encoding="utf-8")
        outcome = generate_document(
            template_text, values, output_path=output_path, search_paths=(Path.cwd(),)
        )
    except (GenerationRunError, OSError) as exc:
        raise CliError(str(exc)) from exc
    _echo_outcome(outcome)


def _echo_outcome(outcome: GenerationOutcome) -> None:
    if outcome.output_path is None:
        click.echo(outcome.document, nl=False)
    else:
        click.echo(str(outcome.output_path))


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
