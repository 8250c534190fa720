"""Logging for the exporter: handlers, module loggers and problem reporting."""

import logging
import sys
from pathlib import Path

from wiki_export.config import LoggingSettings
from wiki_export.errors import Problem

PACKAGE_LOGGER = "wiki_export"


def setup_logging(settings: LoggingSettings, verbose: bool = False) -> None:
    """Send the package's log records to stderr, and to a file if one is set.

    Args:
        settings: Logging section of the export options.
        verbose: If True, override level to DEBUG.
    """
    level_str = "DEBUG" if verbose else settings.level
    # Unknown level names keep the exporter at its WARNING default
    level = getattr(logging, level_str.upper(), logging.WARNING)

    formatter = logging.Formatter(settings.format)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.file:
        log_path = Path(settings.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package logger.

    Args:
        name: Module name, either ``__name__`` or the part after ``wiki_export.``.

    Returns:
        Logger instance for the module.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def report_problem(
    logger: logging.Logger, level: int, message: str, problems: list[Problem]
) -> Problem:
    """Log a message and keep it as a problem of the current run."""
    logger.log(level, message)
    problem = Problem(level=level, message=message)
    problems.append(problem)
    return problem
