"""Logging setup for projmeta.

Reports are written to stdout by the CLI, so the console handler stays at
WARNING unless verbosity is raised. A log file, when given, always records
the full DEBUG trace of the files checked and compared.
"""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "projmeta"

_CONSOLE_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


class _ComponentFormatter(logging.Formatter):
    """Prefix console lines with the emitting component, e.g. ``[projmeta:loader]``."""

    def format(self, record: logging.LogRecord) -> str:
        component = record.name[len(_ROOT) + 1 :] if record.name.startswith(f"{_ROOT}.") else ""
        prefix = f"[{_ROOT}:{component}]" if component else f"[{_ROOT}]"
        return f"{prefix} {record.levelname} {record.getMessage()}"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the logger for a component, given as ``loader`` or ``projmeta.loader``."""
    if not name or name == _ROOT:
        return logging.getLogger(_ROOT)
    if name.startswith(f"{_ROOT}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


def console_level(verbosity: int) -> int:
    """Map a ``-v`` count onto the console log level."""
    return _CONSOLE_LEVELS[max(0, min(verbosity, len(_CONSOLE_LEVELS) - 1))]


def configure_logging(*, verbosity: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Install console and optional file handlers on the projmeta logger.

    Calling it again replaces the handlers from the previous call.
    """
    logger = logging.getLogger(_ROOT)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_level = console_level(verbosity)
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(stream_level)
    stream_handler.setFormatter(_ComponentFormatter())
    logger.addHandler(stream_handler)

    logger_level = stream_level
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)
        logger_level = logging.DEBUG

    logger.setLevel(logger_level)
    return logger


__all__ = ["configure_logging", "console_level", "get_logger"]
