"""
Logging setup for exception-workshop.

Installs a Rich console handler on the package logger. Modules log through
``logging.getLogger(__name__)`` and stay silent until setup_logging() runs.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "exception_workshop"


def setup_logging(level: str | None = None, rich_tracebacks: bool | None = None) -> logging.Logger:
    """
    Configure the package logger with a RichHandler.

    Calling this more than once replaces the level but never stacks handlers.

    Args:
        level: Logging level name (defaults to Config.log_level)
        rich_tracebacks: Render tracebacks with Rich (defaults to
            Config.log_rich_tracebacks)

    Returns:
        The configured package logger
    """
    if level is None or rich_tracebacks is None:
        from exception_workshop.config import get_config

        config = get_config()
        level = level or config.log_level
        if rich_tracebacks is None:
            rich_tracebacks = config.log_rich_tracebacks

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=rich_tracebacks,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
