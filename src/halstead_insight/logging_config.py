"""Logging setup for Halstead Insight.

Console records go through rich on stderr, leaving stdout to the report
itself (CSV and JSON are piped). Every module logs under the
``halstead_insight`` namespace via :func:`get_logger`.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "halstead_insight"

FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def _console_handler(verbose: bool) -> logging.Handler:
    # Paths and messages may contain [brackets]; never treat them as markup
    handler = RichHandler(
        console=Console(stderr=True),
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        show_path=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    return handler


def _file_handler(log_file: Union[str, Path]) -> logging.Handler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Install the console (and optional file) handlers.

    WARNING by default, DEBUG with ``verbose``, ERROR with ``quiet``.
    Calling it again replaces the previous handlers.

    Returns:
        The ``halstead_insight`` logger
    """
    level = _level(verbose, quiet)

    handlers = [_console_handler(verbose)]
    if log_file:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(level=level, handlers=handlers, force=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name`` inside the ``halstead_insight`` namespace."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
