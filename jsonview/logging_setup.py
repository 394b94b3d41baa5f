"""Logging bootstrap for the viewer.

The terminal belongs to the viewer, so records never go to stderr while it
runs. A rotating log file is attached only when ``JSON_VIEW_LOG_FILE`` or
``JSON_VIEW_LOG_LEVEL`` is set; otherwise the package logger has a null
handler.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "jsonview"
ENV_LOG_FILE = "JSON_VIEW_LOG_FILE"
ENV_LOG_LEVEL = "JSON_VIEW_LOG_LEVEL"


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: str | None


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str | None) -> tuple[str, int]:
    normalized = str(raw or "INFO").strip().upper()
    level = getattr(logging, normalized, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    return logging.getLevelName(level), level


def _default_log_path() -> str:
    return str(Path(user_log_dir("json-view", appauthor=False)) / "json-view.log")


def _make_file_handler(level: int, file_path: str) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(env: dict[str, str] | None = None) -> LoggingRuntime:
    """Configure the ``jsonview`` logger hierarchy.

    Idempotent: repeated calls return the originally configured runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    environ = os.environ if env is None else env
    level_name, level = _parse_level(environ.get(ENV_LOG_LEVEL))
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    logger.handlers.clear()

    file_path: str | None = None
    if environ.get(ENV_LOG_FILE) or environ.get(ENV_LOG_LEVEL):
        file_path = environ.get(ENV_LOG_FILE) or _default_log_path()
        try:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            logger.addHandler(_make_file_handler(level, file_path))
        except OSError:
            file_path = None
    if file_path is None:
        logger.addHandler(logging.NullHandler())
    logger.setLevel(level)

    _RUNTIME = LoggingRuntime(level_name=level_name, level=level, file_path=file_path)
    return _RUNTIME


def get_runtime() -> LoggingRuntime | None:
    """Return configured logging runtime, if configure() has run."""
    return _RUNTIME


def reset() -> None:
    """Forget the configured runtime and return the logger to its defaults."""
    global _RUNTIME
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _RUNTIME = None
