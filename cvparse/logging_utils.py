"""
Logging helpers for cvparse.

Defines the package logger and simple utilities for configuring
console and optional file logging.

Every extractor accepts an optional ``log`` argument; when it is omitted
the package logger below is used. The package logger carries a
NullHandler, so the heuristic decision trail stays silent until the host
application (or the CLI) configures logging.
"""

from __future__ import annotations

import logging
from typing import List, Optional

LOG = logging.getLogger("cvparse")
LOG.addHandler(logging.NullHandler())

# Verbosity levels
VERBOSITY_QUIET = 0    # Minimal output (default)
VERBOSITY_NORMAL = 1   # Standard output with status lines
VERBOSITY_VERBOSE = 2  # Detailed debug output (every heuristic decision)


def resolve_log(log: Optional[logging.Logger]) -> logging.Logger:
    """Return the injected logger, or the package logger when none was given."""
    return log if log is not None else LOG


def setup_logging(debug: bool, log_file: Optional[str] = None, verbosity: int = VERBOSITY_QUIET) -> None:
    """
    Setup logging with verbosity control.

    Args:
        debug: Debug flag (overrides verbosity to VERBOSITY_VERBOSE)
        log_file: Optional log file path
        verbosity: Verbosity level (0=quiet, 1=normal, 2=verbose)
    """
    if debug:
        verbosity = VERBOSITY_VERBOSE

    if verbosity >= VERBOSITY_VERBOSE:
        level = logging.DEBUG
    elif verbosity >= VERBOSITY_NORMAL:
        level = logging.INFO
    else:
        level = logging.WARNING  # Quiet mode: only warnings and errors

    # Handlers may already be configured (e.g. by pytest); only update them then
    if logging.root.handlers:
        for handler in logging.root.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
                if verbosity >= VERBOSITY_NORMAL:
                    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
                else:
                    handler.setFormatter(logging.Formatter("%(message)s"))
        logging.root.setLevel(level)
    else:
        handlers: List[logging.Handler] = []

        console = logging.StreamHandler()
        console.setLevel(level)
        if verbosity >= VERBOSITY_NORMAL:
            console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        else:
            console.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console)

        logging.basicConfig(level=level, handlers=handlers, force=True)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # always full detail in file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logging.root.addHandler(file_handler)
        # the file always gets the full decision trail
        LOG.setLevel(logging.DEBUG)
        logging.root.setLevel(logging.DEBUG)

    # pypdf reports recoverable structure problems as warnings
    logging.getLogger("pypdf").setLevel(logging.ERROR)


def fmt_issues(errors: List[str], warnings: List[str]) -> str:
    """
    Compact error/warning string for the one-line-per-file log.
    """
    parts: List[str] = []
    if errors:
        parts.append("errors: " + ", ".join(errors))
    if warnings:
        parts.append("warnings: " + ", ".join(warnings))
    return " | ".join(parts) if parts else "-"
