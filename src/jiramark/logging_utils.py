#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for applications embedding jiramark.

Modules inside the package only create ``logging.getLogger(__name__)``
loggers, all children of the ``jiramark`` logger. :func:`configure_logging`
attaches handlers to that package logger so that missing-handler warnings,
dropped attributes and code-filter runs become visible without touching
the host application's root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = __name__.partition(".")[0]

_DEFAULT_FORMAT = "jiramark %(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(funcName)s] %(message)s"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Attach handlers to the ``jiramark`` package logger.

    Calling this again replaces the handlers installed by the previous call.
    The package logger stops propagating, so records are not duplicated by
    handlers the host has on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG" to see dropped
        attributes and filter commands). Unknown names fall back to INFO.
    log_file : str, optional
        Path of a file that receives the same records as stderr.
    trace_mode : bool, default False
        Include timestamps, logger and function names in every record.

    Returns
    -------
    logging.Logger
        The configured package logger.

    """
    level = _resolve_level(log_level)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False

    for old_handler in package_logger.handlers[:]:
        package_logger.removeHandler(old_handler)
        old_handler.close()

    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for new_handler in handlers:
        new_handler.setLevel(level)
        new_handler.setFormatter(formatter)
        package_logger.addHandler(new_handler)

    if file_error is not None:
        package_logger.warning(f"Could not open log file {log_file}: {file_error}")

    return package_logger
