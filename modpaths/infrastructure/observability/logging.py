"""Logging utilities for modpaths.

This module provides centralised logging configuration and helpers for
contextual logging across the registry, configuration and CLI layers.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ---------------------------------------------------------------------------
# Context variables for structured logging
# ---------------------------------------------------------------------------

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


class ContextualFormatter(logging.Formatter):
    """Formatter that appends context fields to log messages.

    The record handed to other handlers is left untouched.
    """

    def format(self, record: logging.LogRecord) -> str:
        ctx = _log_context.get()
        if ctx:
            ctx_str = " ".join(f"{k}={v}" for k, v in ctx.items())
            record = logging.makeLogRecord(record.__dict__)
            record.msg = f"{record.msg} [{ctx_str}]"
        return super().format(record)


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Temporarily add context fields to all log messages.

    Usage::

        with log_context(app_id="com.beatgames.beatsaber"):
            logger.info("Binding registry")  # message includes context

    Fields are merged with any existing context and restored on exit.
    """
    current = _log_context.get()
    merged = {**current, **fields}
    token = _log_context.set(merged)
    try:
        yield
    finally:
        _log_context.reset(token)


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

_configured = False
# Loggers that received a handler from the get_logger() fallback.
_fallback_loggers: dict[str, logging.Handler] = {}


def configure_logging(level: int = logging.INFO) -> None:
    """Configure application-wide logging.

    Call this once at startup (CLI entry point, agent main) to install a
    single stderr handler with the contextual formatter. Fallback handlers
    added by get_logger() before this call are removed so every logger
    follows ``level``. Later calls are ignored.

    Args:
        level: Log level for the root logger (default INFO).
    """
    global _configured
    if _configured:
        return
    _configured = True

    for name, fallback in list(_fallback_loggers.items()):
        logger = logging.getLogger(name)
        logger.removeHandler(fallback)
        logger.setLevel(logging.NOTSET)
    _fallback_loggers.clear()

    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextualFormatter(LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given name.

    If configure_logging() has not been called, a basic fallback configuration
    is applied to ensure the logger is usable. configure_logging() undoes it.

    Args:
        name: Name of the logger (typically __name__).

    Returns:
        A logging.Logger instance.
    """
    logger = logging.getLogger(name)
    # Fallback if configure_logging was not called
    if not _configured and not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ContextualFormatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        _fallback_loggers[name] = handler
    return logger
