#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/logging_utils.py
"""Logging setup for the ``bbml`` command.

Library modules only create module loggers with ``logging.getLogger(__name__)``
and never install handlers. The command calls :func:`configure_logging` once
per run. Repeated calls replace the handlers an earlier call installed and
leave any other handlers on the root logger (a host application's, or a test
runner's) alone.

Trace mode is aimed at markup problems: it turns the parser, renderer and link
registry loggers up to DEBUG, so unknown tags, link numbering and table
shrinking are all reported, while third-party loggers stay at ``log_level``.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

# Loggers whose debug output explains how a document was laid out
DIAGNOSTIC_LOGGERS = ("bbml.markup", "bbml.renderers", "bbml.links")

CONSOLE_FORMAT = "bbml: %(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"

_installed_handlers: list[logging.Handler] = []


def resolve_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` or ``"INFO"`` into its number.

    Raises
    ------
    ValueError
        If ``log_level`` is not a known level name

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install console (and optionally file) handlers on the root logger.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name for the root logger.
    log_file : str, optional
        File that receives the same records as stderr. If it cannot be opened
        a warning is logged and only stderr is used.
    trace_mode : bool, default False
        Use timestamped output with logger names, and log every diagnostic
        logger at DEBUG regardless of ``log_level``.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = resolve_level(log_level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    for name in DIAGNOSTIC_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if trace_mode else logging.NOTSET)

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)

    return root_logger
