r"""Decorator running a function through a retry template.

Example:
    ```pycon
    >>> from aretry import RetryPolicy, retryable
    >>> attempts = []
    >>> @retryable(RetryPolicy(max_attempts=2, delay=0))
    ... def fetch(key):
    ...     attempts.append(key)
    ...     if len(attempts) == 1:
    ...         raise ConnectionError("Boom!")
    ...     return key.upper()
    ...
    >>> fetch("abc")
    'ABC'
    >>> attempts
    ['abc', 'abc']

    ```
"""

from __future__ import annotations

__all__ = ["retryable"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

from aretry.operation import CallableRetryable
from aretry.policy import RetryPolicy
from aretry.template import RetryTemplate
from aretry.template_async import AsyncRetryTemplate

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.listener import RetryListener


def retryable(
    policy: RetryPolicy | Callable[..., Any] | None = None,
    *,
    listener: RetryListener | None = None,
    name: str | None = None,
) -> Any:
    """Retry every call of the decorated function per ``policy``.

    Works for regular functions and coroutine functions. Each call is an
    independent execution with its own failure history. Failures surface
    as ``RetryError``.

    Args:
        policy: The retry policy. Defaults to ``RetryPolicy()``. The
            decorator can also be applied without parentheses.
        listener: Optional listener notified of retry events.
        name: Operation name used in diagnostics. Defaults to the
            function's qualified name.

    Returns:
        The decorator, or the decorated function when used bare.
    """
    if callable(policy) and not isinstance(policy, RetryPolicy):
        return retryable()(policy)

    retry_policy = policy if policy is not None else RetryPolicy()

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        operation_name = name if name is not None else func.__qualname__

        if inspect.iscoroutinefunction(func):
            async_template = AsyncRetryTemplate(retry_policy, listener)

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await async_template.execute(
                    CallableRetryable(functools.partial(func, *args, **kwargs), operation_name)
                )

            async_wrapper.retry_policy = retry_policy  # type: ignore[attr-defined]
            return async_wrapper

        template = RetryTemplate(retry_policy, listener)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return template.execute(
                CallableRetryable(functools.partial(func, *args, **kwargs), operation_name)
            )

        wrapper.retry_policy = retry_policy  # type: ignore[attr-defined]
        return wrapper

    return decorator
