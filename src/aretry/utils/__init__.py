r"""Utility functions for retry executions.

This package provides the sleep primitives used between attempts and
structured logging helpers.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "async_sleep",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
    "sleep",
]

from aretry.utils.sleep import async_sleep, sleep
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    correlation_scope,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
