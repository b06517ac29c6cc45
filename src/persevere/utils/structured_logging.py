r"""Structured logging utilities for machine-readable log output.

This module provides a JSON formatter and an execution ID stored in a
context variable, so that log aggregation systems can group every entry
written while one operation was being executed.

Structured logging is opt-in: configure a handler with
``StructuredFormatter`` on the ``persevere`` logger, or on the logger given
to a ``LoggingSubscriber``.

Example:
    ```python
    import logging
    from persevere.utils.structured_logging import StructuredFormatter, execution_context

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.getLogger("persevere").addHandler(handler)

    with execution_context("fetch-image-2026-10-19"):
        executor.execute(30, fetch_image)
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "execution_context",
    "get_execution_id",
    "log_structured",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_execution_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "execution_id", default=None
)

# Attributes set on every LogRecord, excluded from the extra fields
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def get_execution_id() -> str | None:
    """Get the execution ID of the current context.

    Returns:
        The current execution ID, or None if not set.

    Example:
        ```pycon
        >>> from persevere.utils.structured_logging import execution_context, get_execution_id
        >>> get_execution_id() is None
        True
        >>> with execution_context("poll-feed"):
        ...     get_execution_id()
        ...
        'poll-feed'

        ```
    """
    return _execution_id.get()


@contextmanager
def execution_context(execution_id: str) -> Generator[None, None, None]:
    """Set the execution ID for the duration of the ``with`` block.

    The previous value is restored on exit, so contexts can be nested.

    Args:
        execution_id: The execution ID to attach to log records.
    """
    token = _execution_id.set(execution_id)
    try:
        yield
    finally:
        _execution_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as one JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, plus ``execution_id`` when set, ``exception``
    when the record carries exception info, and every field passed through
    ``extra``. Values that are not JSON serializable are rendered with
    ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from persevere.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("persevere.doctest")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Attempt 1/3", extra={"attempt": 1})
        >>> json.loads(stream.getvalue())["attempt"]
        1

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        execution_id = get_execution_id()
        if execution_id is not None:
            log_data["execution_id"] = execution_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record timestamp as ISO 8601 in UTC, with milliseconds."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields, included in the JSON output
            of ``StructuredFormatter``.
    """
    logger.log(level, message, extra=extra)
