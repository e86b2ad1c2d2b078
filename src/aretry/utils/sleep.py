r"""Sleep primitives used between retry attempts.

A zero or negative duration performs no suspension at all, which keeps
tests with ``delay=0`` deterministic.
"""

from __future__ import annotations

__all__ = ["async_sleep", "sleep"]

import asyncio
import logging
import time

logger: logging.Logger = logging.getLogger(__name__)


def sleep(seconds: float) -> None:
    """Block the calling thread for ``seconds``.

    Args:
        seconds: The duration of the suspension. Nothing happens if it is
            not positive.

    Example:
        ```pycon
        >>> from aretry.utils.sleep import sleep
        >>> sleep(0)

        ```
    """
    if seconds <= 0:
        return
    logger.debug(f"Waiting {seconds:.2f}s before retry")
    time.sleep(seconds)


async def async_sleep(seconds: float) -> None:
    """Suspend the current task for ``seconds``.

    Cancellation of the task propagates as ``asyncio.CancelledError``.

    Args:
        seconds: The duration of the suspension. Nothing happens if it is
            not positive.
    """
    if seconds <= 0:
        return
    logger.debug(f"Waiting {seconds:.2f}s before retry")
    await asyncio.sleep(seconds)
