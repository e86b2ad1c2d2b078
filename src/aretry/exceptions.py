r"""Exception raised when a retry policy gives up on an operation."""

from __future__ import annotations

__all__ = ["RetryError"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


class RetryError(Exception):
    """Aggregated failure raised when retrying stops without success.

    The error is raised exactly once per failed execution, either because
    the retry policy rejected a failure or because the backoff was
    exhausted. The most recent failure is the ``cause`` (also chained as
    ``__cause__``) and every earlier failure is kept in ``history``,
    oldest first.

    Args:
        message: A descriptive error message.
        cause: The failure that triggered termination.
        history: The failures recorded before ``cause``, oldest first.
        retryable: The operation that was being retried.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryError
        >>> first, last = ValueError("first"), ValueError("last")
        >>> error = RetryError("gave up", cause=last, history=[first])
        >>> error.cause is last
        True
        >>> error.failures == (first, last)
        True

        ```
    """

    def __init__(
        self,
        message: str,
        cause: BaseException,
        history: Iterable[BaseException] = (),
        retryable: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.history: tuple[BaseException, ...] = tuple(history)
        self.retryable = retryable
        self.__cause__ = cause

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.message, self.cause, self.history, self.retryable))

    @property
    def failures(self) -> tuple[BaseException, ...]:
        """The full failure sequence: ``history`` followed by ``cause``."""
        return (*self.history, self.cause)

    @property
    def attempts(self) -> int:
        """The number of failed invocations."""
        return len(self.history) + 1
