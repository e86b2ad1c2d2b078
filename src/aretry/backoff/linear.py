r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.validation import validate_backoff_params


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1), with optional max_delay cap.

    This strategy provides evenly spaced retry delays, which can be useful for
    operations that recover quickly or when you want predictable timing.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.
        max_attempts: Optional number of retries before signaling stop.

    Example:
        ```pycon
        >>> from aretry.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=1.0)
        >>> backoff.calculate(0)  # First retry: 1.0 * 1
        1.0
        >>> backoff.calculate(2)  # Third retry: 1.0 * 3
        3.0
        >>> backoff = LinearBackoff(base_delay=2.0, max_delay=5.0)
        >>> backoff.calculate(5)  # Would be 12.0, but capped
        5.0

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

    def calculate(self, attempt: int) -> float:
        delay = self.base_delay * (attempt + 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
