r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry attempt, regardless of the attempt number.
    Unlike ``FixedBackoff``, the number of attempts is unbounded by default
    and is left to the retry policy.

    Args:
        delay: The fixed delay in seconds to use for all retry attempts (default: 1.0).
        max_attempts: Optional number of retries before signaling stop.

    Example:
        ```pycon
        >>> from aretry.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.calculate(0)  # First retry
        2.5
        >>> backoff.calculate(10)  # Tenth retry
        2.5

        ```
    """

    def __init__(self, delay: float = 1.0, max_attempts: int | None = None) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        super().__init__(max_attempts=max_attempts)
        self.delay = delay

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
