r"""Fixed backoff strategy."""

from __future__ import annotations

__all__ = ["FixedBackoff"]

from aretry.backoff.constant import ConstantBackoff
from aretry.config import DEFAULT_DELAY, DEFAULT_MAX_ATTEMPTS


class FixedBackoff(ConstantBackoff):
    """Fixed interval backoff with a fixed number of retries.

    A ``ConstantBackoff`` whose number of retries is always bounded. This
    is the strategy a ``RetryPolicy`` synthesizes from its
    ``max_attempts`` and ``delay`` when no explicit backoff is given.

    Args:
        interval: The delay in seconds between two attempts (default: 1.0).
        max_attempts: The number of retries allowed (default: 3).

    Example:
        ```pycon
        >>> from aretry.backoff import FixedBackoff
        >>> execution = FixedBackoff(interval=2.0, max_attempts=2).start()
        >>> execution.next_delay()
        2.0
        >>> execution.next_delay()
        2.0
        >>> execution.next_delay() is None
        True

        ```
    """

    def __init__(
        self, interval: float = DEFAULT_DELAY, max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ) -> None:
        if interval < 0:
            msg = f"interval must be non-negative, got {interval}"
            raise ValueError(msg)
        if max_attempts is None:
            msg = "max_attempts is required for FixedBackoff"
            raise ValueError(msg)
        super().__init__(delay=interval, max_attempts=max_attempts)

    @property
    def interval(self) -> float:
        """The delay in seconds between two attempts."""
        return self.delay
