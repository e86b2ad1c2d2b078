r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.validation import validate_backoff_params


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt + 1), with optional max_delay cap.

    This strategy provides a middle ground between linear and exponential backoff,
    starting slow and ramping up gradually.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.
        max_attempts: Optional number of retries before signaling stop.

    Example:
        ```pycon
        >>> from aretry.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=1.0)
        >>> [backoff.calculate(attempt) for attempt in range(5)]
        [1.0, 1.0, 2.0, 3.0, 5.0]
        >>> FibonacciBackoff(base_delay=1.0, max_delay=10.0).calculate(10)
        10.0

        ```
    """

    def __init__(
        self,
        base_delay: float = 1.0,
        max_delay: float | None = None,
        max_attempts: int | None = None,
    ) -> None:
        validate_backoff_params(base_delay=base_delay, max_delay=max_delay, max_attempts=max_attempts)
        super().__init__(max_attempts=max_attempts)
        self.base_delay = base_delay
        self.max_delay = max_delay

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed)."""
        if n <= 0:
            return 0
        if n <= 2:
            return 1
        a, b = 1, 1
        for _ in range(n - 2):
            a, b = b, a + b
        return b

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * self._fibonacci(attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
