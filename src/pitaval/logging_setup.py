"""Logging configuration shared by the CLI and library code.

Provides helpers:
* ``setup_logging`` – idempotent configuration with a stderr handler and an
    optional rotating file handler.
* ``get_logger`` – named logger, configuring logging on first use.
* ``log_call`` – lightweight decorator for entry/exit tracing.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from functools import wraps
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, ParamSpec, TypeVar

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s | %(message)s"
VERBOSE_LEVEL = logging.DEBUG

_installed: list[logging.Handler] = []


def _level_from_env(default: int) -> int:
    level_name = os.getenv("LOG_LEVEL")
    if not level_name:
        return default
    return getattr(logging, level_name.upper(), default)


def setup_logging(verbose: bool = False, force: bool = False) -> None:
    """Configure root logging for the converter.

    The console handler writes to stderr so that the XML output, when a
    caller streams it, never mixes with diagnostics. ``verbose`` lowers the
    level to DEBUG; otherwise ``LOG_LEVEL`` (default WARNING) applies.

    When ``PITAVAL_LOG_DIR`` is set, a daily rotating ``pitaval.log`` keeping
    7 backups is written there in addition to stderr.

    Idempotent unless ``force`` is given, in which case the handlers installed
    by a previous call are replaced.
    """
    if getattr(setup_logging, "_configured", False) and not force:
        return

    root = logging.getLogger()
    if force:
        for h in _installed:
            root.removeHandler(h)
            h.close()
        _installed.clear()

    level = VERBOSE_LEVEL if verbose else _level_from_env(logging.WARNING)
    root.setLevel(level)

    fmt = logging.Formatter(DEFAULT_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    console.setLevel(level)
    root.addHandler(console)
    _installed.append(console)

    log_dir = os.getenv("PITAVAL_LOG_DIR")
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            path / "pitaval.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        file_handler.setLevel(logging.DEBUG)
        root.addHandler(file_handler)
        _installed.append(file_handler)

    setup_logging._configured = True  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    """Return a logger ensuring configuration is applied first."""
    setup_logging()
    return logging.getLogger(name)


P = ParamSpec("P")
R = TypeVar("R")


def log_call(
    level: int = logging.DEBUG,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return decorator logging entry/exit of target function.

    Example::

        @log_call()
        def convert_file(self, path): ...
    """

    def _decorator(fn: Callable[P, R]) -> Callable[P, R]:
        logger = get_logger(fn.__module__)

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            if logger.isEnabledFor(level):
                logger.log(
                    level,
                    "ENTER %s args=%s kwargs=%s",
                    fn.__qualname__,
                    _shorten(args),
                    _shorten(kwargs),
                )
            result = fn(*args, **kwargs)
            if logger.isEnabledFor(level):
                logger.log(level, "EXIT %s -> %s", fn.__qualname__, _shorten(result))
            return result

        return wrapper

    return _decorator


def _shorten(obj: Any, limit: int = 120) -> str:
    """Return a truncated repr for logging."""
    s = repr(obj)
    if len(s) > limit:
        return s[: limit - 3] + "..."
    return s
