"""CLI module for exception-workshop."""

from exception_workshop.cli.main import cli, main

__all__ = ["cli", "main"]
