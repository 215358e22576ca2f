"""
Command-line interface for API Contract Builder.

This module provides the CLI using Click framework for argument parsing.
It loads API definitions or resource models from Python source, validates
them and renders them in the requested format.
"""

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console
from rich.markup import escape

from api_contract_builder import __version__
from api_contract_builder.config import Config, find_config_file, load_config

console = Console()
err_console = Console(stderr=True)

FORMAT_CHOICES = ["text", "json", "yaml", "markdown"]


def _configure_logging(verbose: bool) -> None:
    """Send library debug logs to stderr when running verbosely."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _write_output(formatted_output: str, output: Optional[Path]) -> None:
    """Write formatted output to a file, or straight to stdout."""
    if output:
        output.write_text(formatted_output, encoding="utf-8")
        console.print(f"[green]Results written to:[/green] {output}")
    else:
        # Print directly to stdout to preserve ANSI codes from formatter
        sys.stdout.write(formatted_output)
        sys.stdout.flush()


def _resolve_api(obj: Any) -> tuple:
    """Turn a loaded object into a validated API definition."""
    from api_contract_builder.builder import Builder
    from api_contract_builder.validation import as_api

    if isinstance(obj, Builder):
        return obj.build()
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)):
        return as_api(obj)
    raise click.UsageError(
        f"Expected a Builder or a sequence of endpoints, got {type(obj).__name__}"
    )


@click.group()
@click.version_option(version=__version__, prog_name="api-contract-builder")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path]) -> None:
    """API Contract Builder - Validate and generate REST API contracts."""
    ctx.ensure_object(dict)
    if config is None:
        config = find_config_file(Path.cwd())
    ctx.obj["config"] = load_config(config) if config else Config()


@cli.command()
@click.option(
    "--source",
    "-s",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Python file or package declaring the API.",
)
@click.option(
    "--attr",
    type=str,
    default="api",
    help="Name of the API variable (default: api).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def check(
    ctx: click.Context,
    source: Path,
    attr: str,
    output_format: str,
    output: Optional[Path],
    verbose: bool,
) -> None:
    """Validate an API definition and print its endpoints."""
    from api_contract_builder.loader import load_object
    from api_contract_builder.output.formatters import get_formatter
    from api_contract_builder.validation import find_duplicate_aliases

    config: Config = ctx.obj["config"]
    _configure_logging(verbose)

    if verbose:
        err_console.print(f"[blue]Loading API definition from:[/blue] {source}")
        err_console.print(f"[blue]API variable:[/blue] {attr}")

    try:
        api = _resolve_api(load_object(source, attr))

        if config.lint.warn_duplicate_aliases:
            for alias in find_duplicate_aliases(api):
                err_console.print(
                    f"[yellow]Warning:[/yellow] alias '{escape(alias)}' is used by several endpoints"
                )

        formatter = get_formatter(output_format, config.output)
        _write_output(formatter.format_api(list(api)), output)

    except click.UsageError:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        if verbose:
            import traceback
            console.print(escape(traceback.format_exc()))
        raise click.Abort()


@cli.command()
@click.argument("resource")
@click.option(
    "--source",
    "-s",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Python file or package declaring the resource model.",
)
@click.option(
    "--attr",
    type=str,
    required=True,
    help="Name of the pydantic model describing the resource.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def crud(
    ctx: click.Context,
    resource: str,
    source: Path,
    attr: str,
    output_format: str,
    output: Optional[Path],
    verbose: bool,
) -> None:
    """Generate the CRUD endpoints of RESOURCE and print them."""
    from api_contract_builder.crud import generate_crud
    from api_contract_builder.loader import load_object
    from api_contract_builder.output.formatters import get_formatter

    config: Config = ctx.obj["config"]
    _configure_logging(verbose)

    try:
        api = generate_crud(resource, load_object(source, attr))

        formatter = get_formatter(output_format, config.output)
        _write_output(formatter.format_api(list(api)), output)

    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise click.Abort()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
