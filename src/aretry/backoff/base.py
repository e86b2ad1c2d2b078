r"""Abstract base class for backoff strategies and the per-execution
backoff cursor."""

from __future__ import annotations

__all__ = ["BackoffExecution", "BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed operation based on the attempt number, and how many retries
    it allows before signaling stop.

    Strategies are stateless and can be shared between executions. The
    state of one execution lives in the ``BackoffExecution`` returned by
    ``start()``.

    Args:
        max_attempts: The number of delays handed out before the
            strategy signals stop. ``None`` means unbounded.
    """

    def __init__(self, max_attempts: int | None = None) -> None:
        if max_attempts is not None and max_attempts < 0:
            msg = f"max_attempts must be non-negative if specified, got {max_attempts}"
            raise ValueError(msg)
        self.max_attempts = max_attempts

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given retry attempt.

        Args:
            attempt: The current attempt number (0-indexed). For example,
                attempt=0 is the first retry, attempt=1 is the second retry, etc.

        Returns:
            The calculated delay in seconds before the next retry attempt.
        """

    def start(self, max_attempts: int | None = None) -> BackoffExecution:
        """Start a new backoff execution.

        Args:
            max_attempts: Fallback limit used when the strategy itself is
                unbounded. The strategy's own ``max_attempts`` takes
                precedence when it is set.

        Returns:
            A fresh cursor owned by a single execution.

        Example:
            ```pycon
            >>> from aretry.backoff import ConstantBackoff
            >>> execution = ConstantBackoff(delay=0.5).start(max_attempts=2)
            >>> execution.next_delay(), execution.next_delay(), execution.next_delay()
            (0.5, 0.5, None)

            ```
        """
        limit = self.max_attempts if self.max_attempts is not None else max_attempts
        return BackoffExecution(self, limit)

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__qualname__}({args})"


class BackoffExecution:
    """Cursor over the delays of a backoff strategy for one execution.

    ``next_delay()`` returns the delay in seconds before the next retry,
    or ``None`` once the retry budget is spent.

    Args:
        strategy: The strategy computing the delays.
        max_attempts: The number of delays to hand out. ``None`` means
            unbounded.
    """

    def __init__(self, strategy: BaseBackoffStrategy, max_attempts: int | None = None) -> None:
        self.strategy = strategy
        self.max_attempts = max_attempts
        self.attempts = 0

    def next_delay(self) -> float | None:
        """Return the next delay, or ``None`` to signal stop."""
        if self.max_attempts is not None and self.attempts >= self.max_attempts:
            return None
        delay = self.strategy.calculate(self.attempts)
        self.attempts += 1
        return delay

    def __repr__(self) -> str:
        return (
            f"{type(self).__qualname__}(strategy={self.strategy!r}, "
            f"attempts={self.attempts}, max_attempts={self.max_attempts})"
        )
