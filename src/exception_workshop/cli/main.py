"""Main CLI entry point for the exception workshop.

Usage:
    exception-workshop --help
    exception-workshop list
    exception-workshop kinds
    exception-workshop run parse-int --input '{"text": "619"}'
"""

import click

from exception_workshop.cli.commands import kinds, list_operations_command, run
from exception_workshop.utils.logging_helpers import setup_logging


@click.group()
@click.version_option(package_name="exception-workshop")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (default: LOG_LEVEL or INFO)",
)
def cli(log_level: str | None) -> None:
    """Explore utility operations and the errors they raise.

    Commands:
        list   - List every operation and its error kinds
        kinds  - List the error taxonomy
        run    - Run an operation on a JSON payload
    """
    setup_logging(log_level)


# Register commands directly (not as subgroup)
cli.add_command(list_operations_command, name="list")
cli.add_command(kinds)
cli.add_command(run)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
