"""Operation commands for CLI.

Commands for exploring the operation catalog:
- list: List every operation and the errors it raises
- kinds: List the error taxonomy
- run: Run an operation on a JSON payload
"""

from __future__ import annotations

import json
import logging

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exception_workshop.catalog import (
    UnknownOperationError,
    get_operation,
    list_operations,
    run_operation,
)
from exception_workshop.config import get_config
from exception_workshop.errors import ErrorKind, error_for_kind

logger = logging.getLogger(__name__)

console = Console()


@click.command(name="list")
def list_operations_command() -> None:
    """List every operation and the errors it may raise."""
    table = Table(title="Operations")
    table.add_column("Operation", style="cyan", no_wrap=True)
    table.add_column("Summary")
    table.add_column("Error kinds", style="red")

    for spec in list_operations():
        table.add_row(
            spec.name,
            spec.summary,
            ", ".join(kind.value for kind in spec.error_kinds),
        )

    console.print(table)


@click.command()
def kinds() -> None:
    """List the error kinds and the exception raised for each."""
    table = Table(title="Error kinds")
    table.add_column("Kind", style="red", no_wrap=True)
    table.add_column("Exception", style="cyan", no_wrap=True)
    table.add_column("Description")

    for kind in ErrorKind:
        error_cls = error_for_kind(kind)
        table.add_row(kind.value, error_cls.__name__, error_cls.__doc__ or "")

    console.print(table)


@click.command()
@click.argument("operation")
@click.option(
    "--input", "-i", "payload",
    required=True,
    help='Operation arguments as a JSON object, e.g. \'{"text": "abc"}\'',
)
@click.option(
    "--bits", "-b",
    type=click.Choice(["8", "16", "32", "64"]),
    default=None,
    help="Integer width for checked arithmetic (default: INTEGER_BITS or 32)",
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)
def run(operation: str, payload: str, bits: str | None, output_format: str) -> None:
    """Run OPERATION on a JSON payload.

    Exits with status 1 when the operation fails with one of its error kinds.

    Examples:
        exception-workshop run reverse-text -i '{"text": "strawberry"}'
        exception-workshop run divide-numbers -i '{"dividend": 125, "divisor": 0}'
    """
    try:
        spec = get_operation(operation)
    except UnknownOperationError as e:
        raise click.BadParameter(str(e), param_hint="OPERATION") from e

    try:
        arguments = json.loads(payload)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}", param_hint="--input") from e
    if not isinstance(arguments, dict):
        raise click.BadParameter("Payload must be a JSON object", param_hint="--input")

    integer_bits = int(bits) if bits else get_config().integer_bits

    try:
        result = run_operation(spec.name, arguments, integer_bits=integer_bits)
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--input") from e

    if output_format == "json":
        click.echo(result.model_dump_json())
    elif result.ok:
        console.print(f"[green]{spec.name}[/green] -> {escape(str(result.value))}")
    else:
        console.print(
            f"[red]{spec.name} failed[/red] "
            f"{escape(f'[{result.error_kind.value}]')} {escape(result.message or '')}"
        )

    if not result.ok:
        raise SystemExit(1)
