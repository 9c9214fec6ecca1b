"""Logging configuration for the CLI."""

import logging
from typing import Union

from rich.logging import RichHandler


def setup_logging(level: Union[str, int] = "INFO", verbose: bool = False) -> logging.Logger:
    """Route log records through rich.

    Args:
        level: Log level name or number
        verbose: If True, force DEBUG
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else level)

    # Remove existing handlers (avoid duplicates)
    root_logger.handlers.clear()

    handler = RichHandler(show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger
