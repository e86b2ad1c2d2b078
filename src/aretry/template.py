r"""Synchronous retry execution engine.

This module provides the ``RetryTemplate`` class that executes an
operation and re-invokes it according to a ``RetryPolicy`` until it
succeeds, the policy rejects a failure, or the backoff is exhausted.
"""

from __future__ import annotations

__all__ = ["RetryTemplate", "exhausted_message"]

import logging
from typing import TYPE_CHECKING, Any

from aretry.exceptions import RetryError
from aretry.listener import RetryListener
from aretry.operation import as_retryable
from aretry.policy import RetryPolicy
from aretry.utils.sleep import sleep as default_sleep

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.operation import Retryable

logger: logging.Logger = logging.getLogger(__name__)


def exhausted_message(retryable: Retryable) -> str:
    """Return the message of the ``RetryError`` raised for ``retryable``."""
    return f"Retry policy for operation '{retryable.name}' exhausted; aborting execution"


class RetryTemplate:
    """Executes operations with automatic retry logic.

    The initial invocation is never reported to the listener: hooks only
    fire around retry attempts. Every failure, including the initial one,
    goes through the policy's exception classifier before another attempt
    is made.

    The template holds no per-execution state, so a single instance
    (and the policy and listener it holds) can be used by concurrent
    callers. Each call to ``execute`` owns its own failure history and
    backoff cursor.

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``.
        listener: The listener notified of retry events. Defaults to a
            no-op ``RetryListener``.
        sleep: The function used to wait between attempts. Defaults to
            ``aretry.utils.sleep.sleep`` which skips zero delays.

    Attributes:
        retry_policy: The retry policy, may be replaced between executions.
        retry_listener: The retry listener, may be replaced between executions.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy, RetryTemplate
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("Boom!")
        ...     return "finally succeeded"
        ...
        >>> template = RetryTemplate(RetryPolicy(max_attempts=3, delay=0))
        >>> template.execute(flaky)
        'finally succeeded'
        >>> len(calls)
        3

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        listener: RetryListener | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.retry_policy: RetryPolicy = policy if policy is not None else RetryPolicy()
        self.retry_listener: RetryListener = listener if listener is not None else RetryListener()
        self.sleep: Callable[[float], None] = sleep if sleep is not None else default_sleep

    def execute(self, retryable: Retryable | Callable[[], Any]) -> Any:
        """Execute the operation, retrying failures per the policy.

        Args:
            retryable: A ``Retryable`` or a zero-argument callable.

        Returns:
            The result of the first successful invocation.

        Raises:
            RetryError: If the policy rejects a failure or the backoff is
                exhausted. Its ``cause`` is the last failure and its
                ``history`` holds the earlier ones, oldest first.
        """
        retryable = as_retryable(retryable)
        policy = self.retry_policy
        listener = self.retry_listener

        logger.debug(
            f"Executing operation '{retryable.name}'",
            extra={"operation": retryable.name, "attempt": 0},
        )
        try:
            result = retryable.execute()
        except Exception as exc:
            failures: list[Exception] = [exc]
        else:
            return result

        backoff = policy.start_backoff()
        while True:
            failure = failures[-1]
            if not policy.should_retry(failure):
                logger.debug(
                    f"Operation '{retryable.name}' failed with non-retryable "
                    f"{type(failure).__name__}",
                    extra={"operation": retryable.name, "attempt": backoff.attempts},
                )
                break

            delay = backoff.next_delay()
            if delay is None:
                logger.debug(
                    f"Backoff for operation '{retryable.name}' exhausted after "
                    f"{backoff.attempts} retries",
                    extra={"operation": retryable.name, "attempt": backoff.attempts},
                )
                break

            self.sleep(delay)
            listener.before_retry(policy, retryable)
            logger.debug(
                f"Retrying operation '{retryable.name}' ({backoff.attempts} retries so far)",
                extra={"operation": retryable.name, "attempt": backoff.attempts},
            )
            try:
                result = retryable.execute()
            except Exception as exc:
                failures.append(exc)
                listener.on_retry_failure(policy, retryable, exc)
                continue

            listener.on_retry_success(policy, retryable, result)
            return result

        error = RetryError(
            exhausted_message(retryable),
            cause=failures[-1],
            history=failures[:-1],
            retryable=retryable,
        )
        listener.on_retry_policy_exhaustion(policy, retryable, error.cause)
        raise error from error.cause

    def invoke(self, retryable: Retryable | Callable[[], Any]) -> Any:
        """Execute the operation and raise the last failure itself on
        error.

        This is convenient when callers already handle the operation's own
        exception types and do not care about the failure history.

        Args:
            retryable: A ``Retryable`` or a zero-argument callable.

        Returns:
            The result of the first successful invocation.

        Raises:
            Exception: The last failure of the operation.
        """
        try:
            return self.execute(retryable)
        except RetryError as err:
            cause = err.cause
        raise cause
