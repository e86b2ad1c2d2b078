r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import logging
import random

from aretry.backoff.base import BaseBackoffStrategy
from aretry.config import DEFAULT_MULTIPLIER
from aretry.validation import validate_backoff_params

logger: logging.Logger = logging.getLogger(__name__)


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (multiplier ** attempt), with optional
    max_delay cap and optional jitter.

    Args:
        base_delay: The base delay in seconds (default: 0.3).
        multiplier: Growth factor between two consecutive delays
            (default: 2.0). Must be >= 1.
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value (before jitter).
        jitter: Factor for adding random jitter. The jitter is calculated as
            ``random.uniform(0, jitter) * delay`` and ADDED to the delay.
            Set to 0 to disable jitter.
        max_attempts: Optional number of retries before signaling stop.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.3)
        >>> backoff.calculate(0)  # First retry
        0.3
        >>> backoff.calculate(1)  # Second retry
        0.6
        >>> backoff.calculate(2)  # Third retry
        1.2
        >>> # With max_delay cap
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
        >>> backoff.calculate(10)  # Would be 1024.0, but capped
        5.0

        ```
    """

    def __init__(
        self,
        base_delay: float = 0.3,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_delay: float | None = None,
        jitter: float = 0.0,
        max_attempts: int | None = None,
    ) -> None:
        validate_backoff_params(
            base_delay=base_delay, max_delay=max_delay, max_attempts=max_attempts, jitter=jitter
        )
        if multiplier < 1:
            msg = f"multiplier must be >= 1, got {multiplier}"
            raise ValueError(msg)
        super().__init__(max_attempts=max_attempts)
        self.base_delay = base_delay
        self.multiplier = multiplier
        self.max_delay = max_delay
        self.jitter = jitter

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The current attempt number (0-indexed).

        Returns:
            The calculated delay: base_delay * (multiplier ** attempt),
            capped at max_delay if set, plus jitter if configured.
        """
        delay = self.base_delay * (self.multiplier**attempt)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        if self.jitter > 0:
            extra = random.uniform(0, self.jitter) * delay  # noqa: S311
            logger.debug(f"Adding jitter of {extra:.2f}s to a delay of {delay:.2f}s")
            delay += extra
        return delay
