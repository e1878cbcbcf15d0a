"""Logger configuration and convenience helpers."""

from __future__ import annotations

import logging
import sys

_DEFAULT_LOGGER_NAME = "dynrows"
_DEFAULT_LOG_LEVEL = logging.WARNING
_DEFAULT_FORMATTER = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
_DEFAULT_HANDLER = logging.StreamHandler(sys.stdout)
_DEFAULT_HANDLER.setFormatter(_DEFAULT_FORMATTER)


def _configure_logger(logger: logging.Logger, level: int) -> None:
    """
    Configure a logger with the given level and the shared stdout handler.

    The level is only applied when the logger has none of its own, so an
    explicit ``set_level`` call is never undone by a later ``get_logger``.

    Parameters
    ----------
    logger : logging.Logger
        The logger instance to configure.
    level : int
        The logging level to set if the logger's level is not already set.

    Examples
    --------
    >>> import logging
    >>> from dynrows.utils.logger import _configure_logger
    >>> logger = logging.getLogger("dynrows.example")
    >>> _configure_logger(logger, logging.INFO)
    """
    if logger.level == logging.NOTSET:
        logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(_DEFAULT_HANDLER)
    logger.propagate = False


def get_logger(name: str | None = None, level: int = _DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Return a configured logger for the given name."""
    logger = logging.getLogger(name or _DEFAULT_LOGGER_NAME)
    _configure_logger(logger, level)
    return logger


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def set_level(level: int | str, logger_names: list[str] | None = None) -> None:
    """Set the log level for one or more logger names.

    Without explicit names, every ``dynrows`` logger created so far is updated
    as well, since each one carries its own level.
    """
    resolved = _resolve_level(level)
    if logger_names:
        for name in logger_names:
            logging.getLogger(name).setLevel(resolved)
        return
    logging.getLogger(_DEFAULT_LOGGER_NAME).setLevel(resolved)
    prefix = f"{_DEFAULT_LOGGER_NAME}."
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and name.startswith(prefix):
            logger.setLevel(resolved)
