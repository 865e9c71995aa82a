"""
Logging setup shared by the command line harness and the HTTP app.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Route the root logger through a Rich handler.

    Library modules never call this; entry points do, once.

    Args:
        level: Threshold for the ``wordmover`` loggers
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=console, rich_tracebacks=True, markup=True, show_path=False)
        ],
        force=True,
    )
    logging.getLogger("wordmover").setLevel(level)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``wordmover`` namespace.

    Args:
        name: Name for the logger, typically the module name

    Returns:
        A logger instance
    """
    return logging.getLogger(f"wordmover.{name}")
