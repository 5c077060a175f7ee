"""CLI entry point for jmesplus.

Invoked as::

    jmesplus [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m jmesplus.cli.main

Commands
--------
eval        Evaluate an expression against a JSON or YAML document
functions   List the registered extension functions
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jmesplus.registry.registry import FunctionRegistry, default_registry

console = Console()
err_console = Console(stderr=True)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _registry(plugins: bool) -> FunctionRegistry:
    registry = default_registry()
    if plugins:
        registry = registry.load_entrypoints()
    return registry


def _read_document(path: str | None) -> str:
    """Read the input document from ``path`` or stdin, exiting on error."""
    if path is None or path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_document(text: str, input_format: str, path: str | None) -> Any:
    """Decode JSON or YAML text, exiting on error.

    ``auto`` tries JSON first and falls back to YAML.
    """
    if not text.strip():
        return None
    try:
        if input_format == "yaml":
            return yaml.safe_load(text)
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            if input_format == "json":
                raise
            return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        err_console.print(f"[red]Invalid document[/red] {path or '<stdin>'}: {escape(str(exc))}")
        sys.exit(1)


def _dump(result: Any, output_format: str) -> str:
    if output_format == "yaml":
        text = yaml.safe_dump(result, default_flow_style=False, allow_unicode=True)
        # Scalars are followed by an explicit document-end marker.
        return text.removesuffix("\n...\n").rstrip("\n")
    # YAML input may carry timestamps, which JSON has no type for.
    return json.dumps(result, indent=2, ensure_ascii=False, default=str)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="jmesplus")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
def cli(log_level: str) -> None:
    """Evaluate JMESPath expressions with typed extension functions."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    import jmespath

    from jmesplus import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]jmesplus[/bold]", f"v{__version__}")
    table.add_row("jmespath", f"v{jmespath.__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# functions command
# ---------------------------------------------------------------------------


@cli.command(name="functions")
@click.option(
    "--plugins/--no-plugins",
    default=True,
    help="Include functions published by installed packages",
)
def functions_command(plugins: bool) -> None:
    """List the registered extension functions."""
    registry = _registry(plugins)

    table = Table(title=f"{len(registry)} function(s)", show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Arguments")
    table.add_column("Description")
    for spec in registry:
        signature = ", ".join(argument.label for argument in spec.arguments)
        table.add_row(spec.name, escape(signature), escape(spec.doc))
    console.print(table)


# ---------------------------------------------------------------------------
# eval command
# ---------------------------------------------------------------------------


@cli.command(name="eval")
@click.argument("expression")
@click.argument("file", required=False, type=click.Path(exists=False))
@click.option(
    "--input-format",
    "input_format",
    type=click.Choice(["auto", "json", "yaml"], case_sensitive=False),
    default="auto",
    help="Format of the input document",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Result output format",
)
@click.option(
    "--plugins/--no-plugins",
    default=True,
    help="Include functions published by installed packages",
)
def eval_command(
    expression: str,
    file: str | None,
    input_format: str,
    output_format: str,
    plugins: bool,
) -> None:
    """Evaluate EXPRESSION against a document.

    FILE is a JSON or YAML document; stdin is read when it is omitted or "-".
    """
    from jmesplus.evaluator.options import search

    document = _load_document(_read_document(file), input_format.lower(), file)
    try:
        result = search(expression, document, registry=_registry(plugins))
    except ValueError as exc:
        # Covers jmespath errors and every error the functions raise.
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    click.echo(_dump(result, output_format.lower()))


if __name__ == "__main__":
    cli()
