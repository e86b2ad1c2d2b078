r"""Listeners observing the retry lifecycle.

This module provides the ``RetryListener`` base class, whose four hooks
do nothing by default so that subclasses only override the events they
care about:

- before_retry: Called before each retry attempt (after backoff)
- on_retry_success: Called when a retry attempt succeeds
- on_retry_failure: Called when a retry attempt fails
- on_retry_policy_exhaustion: Called when retrying stops without success

No hook fires around the initial invocation of an operation.

Example:
    ```pycon
    >>> from aretry import RetryListener, RetryPolicy, RetryTemplate
    >>> class PrintingListener(RetryListener):
    ...     def before_retry(self, policy, retryable):
    ...         print(f"retrying {retryable.name}")
    ...
    >>> template = RetryTemplate(RetryPolicy(delay=0), listener=PrintingListener())

    ```
"""

from __future__ import annotations

__all__ = ["CompositeRetryListener", "LoggingRetryListener", "RetryListener"]

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.operation import Retryable
    from aretry.policy import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class RetryListener:
    """Observer of retry executions with no-op hooks.

    Exceptions raised by a hook are not caught by the retry engine.
    """

    def before_retry(self, policy: RetryPolicy, retryable: Retryable) -> None:
        """Called immediately before a retry attempt invokes the operation."""

    def on_retry_success(self, policy: RetryPolicy, retryable: Retryable, result: Any) -> None:
        """Called after a retry attempt succeeded."""

    def on_retry_failure(
        self, policy: RetryPolicy, retryable: Retryable, exc: BaseException
    ) -> None:
        """Called after a retry attempt failed."""

    def on_retry_policy_exhaustion(
        self, policy: RetryPolicy, retryable: Retryable, exc: BaseException
    ) -> None:
        """Called once retrying stops, either because the failure was
        rejected or because the backoff was exhausted."""


class CompositeRetryListener(RetryListener):
    """Dispatches every event to a list of listeners, in order.

    Args:
        listeners: The listeners to notify.

    Example:
        ```pycon
        >>> from aretry.listener import CompositeRetryListener, LoggingRetryListener
        >>> composite = CompositeRetryListener([LoggingRetryListener()])
        >>> composite.add(LoggingRetryListener())
        >>> len(composite.listeners)
        2

        ```
    """

    def __init__(self, listeners: Iterable[RetryListener] = ()) -> None:
        self.listeners: list[RetryListener] = list(listeners)

    def add(self, listener: RetryListener) -> None:
        """Register an additional listener."""
        self.listeners.append(listener)

    def before_retry(self, policy: RetryPolicy, retryable: Retryable) -> None:
        for listener in self.listeners:
            listener.before_retry(policy, retryable)

    def on_retry_success(self, policy: RetryPolicy, retryable: Retryable, result: Any) -> None:
        for listener in self.listeners:
            listener.on_retry_success(policy, retryable, result)

    def on_retry_failure(
        self, policy: RetryPolicy, retryable: Retryable, exc: BaseException
    ) -> None:
        for listener in self.listeners:
            listener.on_retry_failure(policy, retryable, exc)

    def on_retry_policy_exhaustion(
        self, policy: RetryPolicy, retryable: Retryable, exc: BaseException
    ) -> None:
        for listener in self.listeners:
            listener.on_retry_policy_exhaustion(policy, retryable, exc)


class LoggingRetryListener(RetryListener):
    """Logs every retry event.

    Args:
        logger: Logger to use. Defaults to this module's logger.
        level: Level for the retry events. Exhaustion is always logged
            at WARNING or above.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level

    def before_retry(self, policy: RetryPolicy, retryable: Retryable) -> None:  # noqa: ARG002
        self.logger.log(
            self.level, f"Retrying operation '{retryable.name}'", extra={"operation": retryable.name}
        )

    def on_retry_success(
        self, policy: RetryPolicy, retryable: Retryable, result: Any  # noqa: ARG002
    ) -> None:
        self.logger.log(
            self.level,
            f"Retry of operation '{retryable.name}' succeeded",
            extra={"operation": retryable.name},
        )

    def on_retry_failure(
        self, policy: RetryPolicy, retryable: Retryable, exc: BaseException  # noqa: ARG002
    ) -> None:
        self.logger.log(
            self.level,
            f"Retry of operation '{retryable.name}' failed: {type(exc).__name__}: {exc}",
            extra={"operation": retryable.name},
        )

    def on_retry_policy_exhaustion(
        self, policy: RetryPolicy, retryable: Retryable, exc: BaseException  # noqa: ARG002
    ) -> None:
        self.logger.log(
            max(self.level, logging.WARNING),
            f"Retry policy for operation '{retryable.name}' exhausted: "
            f"{type(exc).__name__}: {exc}",
            extra={"operation": retryable.name},
        )
