"""Logging setup shared by the CLI and the web server."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> None:
    """Route the package loggers through a rich handler.

    Args:
        level: Log level name for the ``lingopivot`` logger
        console: Console to write to (stderr if not provided)
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("lingopivot")
    logger.handlers = [handler]
    logger.setLevel(level.upper())
    logger.propagate = False
