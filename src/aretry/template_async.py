r"""Asynchronous retry execution engine.

This module provides the ``AsyncRetryTemplate`` class, the asyncio
counterpart of ``RetryTemplate``. Waits between attempts use
``asyncio.sleep`` so other tasks run during the backoff.
"""

from __future__ import annotations

__all__ = ["AsyncRetryTemplate"]

import inspect
import logging
from typing import TYPE_CHECKING, Any

from aretry.exceptions import RetryError
from aretry.listener import RetryListener
from aretry.operation import as_retryable
from aretry.policy import RetryPolicy
from aretry.template import exhausted_message
from aretry.utils.sleep import async_sleep

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.operation import Retryable

logger: logging.Logger = logging.getLogger(__name__)


async def _invoke(retryable: Retryable) -> Any:
    result = retryable.execute()
    if inspect.isawaitable(result):
        result = await result
    return result


class AsyncRetryTemplate:
    """Executes coroutine operations with automatic retry logic.

    The state machine is the one of ``RetryTemplate``. Listener hooks are
    invoked synchronously and should be fast operations.

    Cancelling the task while it waits between attempts propagates
    ``asyncio.CancelledError`` immediately; it is never treated as a
    failure of the operation.

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``.
        listener: The listener notified of retry events. Defaults to a
            no-op ``RetryListener``.
        sleep: The coroutine function used to wait between attempts.
            Defaults to ``aretry.utils.sleep.async_sleep``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncRetryTemplate, RetryPolicy
        >>> async def fetch():
        ...     return "data"
        ...
        >>> template = AsyncRetryTemplate(RetryPolicy(delay=0))
        >>> asyncio.run(template.execute(fetch))
        'data'

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        listener: RetryListener | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self.retry_policy: RetryPolicy = policy if policy is not None else RetryPolicy()
        self.retry_listener: RetryListener = listener if listener is not None else RetryListener()
        self.sleep: Callable[[float], Awaitable[None]] = (
            sleep if sleep is not None else async_sleep
        )

    async def execute(self, retryable: Retryable | Callable[[], Awaitable[Any]]) -> Any:
        """Execute the operation, retrying failures per the policy.

        The operation may return an awaitable or a plain value.

        Args:
            retryable: A ``Retryable`` or a zero-argument coroutine function.

        Returns:
            The result of the first successful invocation.

        Raises:
            RetryError: If the policy rejects a failure or the backoff is
                exhausted.
        """
        retryable = as_retryable(retryable)
        policy = self.retry_policy
        listener = self.retry_listener

        logger.debug(
            f"Executing operation '{retryable.name}'",
            extra={"operation": retryable.name, "attempt": 0},
        )
        try:
            result = await _invoke(retryable)
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

            await self.sleep(delay)
            listener.before_retry(policy, retryable)
            logger.debug(
                f"Retrying operation '{retryable.name}' ({backoff.attempts} retries so far)",
                extra={"operation": retryable.name, "attempt": backoff.attempts},
            )
            try:
                result = await _invoke(retryable)
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

    async def invoke(self, retryable: Retryable | Callable[[], Awaitable[Any]]) -> Any:
        """Execute the operation and raise the last failure itself on
        error."""
        try:
            return await self.execute(retryable)
        except RetryError as err:
            cause = err.cause
        raise cause
