r"""Structured logging utilities for machine-readable retry logs.

The retry engines log every attempt with the ``operation`` and
``attempt`` fields attached through ``extra``. The ``StructuredFormatter``
renders those records as JSON objects, and correlation ids let related
executions be grouped by a log aggregation system.

Structured logging is opt-in:

```python
import logging
from aretry.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("aretry")
logger.addHandler(handler)
logger.setLevel(logging.DEBUG)
```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes every LogRecord carries; anything else came from ``extra``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-123")
        >>> get_correlation_id()
        'job-123'
        >>> clear_correlation_id()
        >>> get_correlation_id() is None
        True

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    The value lives in a context variable, so concurrent threads and
    asyncio tasks each see their own id.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: str) -> Generator[str, None, None]:
    """Set a correlation ID for the duration of a ``with`` block.

    The previous value is restored on exit.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import correlation_scope, get_correlation_id
        >>> with correlation_scope("batch-7"):
        ...     get_correlation_id()
        ...
        'batch-7'

        ```
    """
    token = _correlation_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp in UTC
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - module, function, line: Origin of the record
        - correlation_id: Only when one is set

    Fields passed through ``extra`` (for instance ``operation`` and
    ``attempt`` from the retry engines) are copied to the output.
    Values that are not JSON serializable are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("aretry", logging.INFO, __file__, 1, "done", (), None)
        >>> record.operation = "fetch"
        >>> json.loads(StructuredFormatter().format(record))["operation"]
        'fetch'

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

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
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
        **extra: Additional structured fields to include in the log.
    """
    logger.log(level, message, extra=extra)
