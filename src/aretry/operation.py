r"""Retryable operations.

A retryable operation is a named, zero-argument unit of work. Any object
with a ``name`` attribute and an ``execute()`` method qualifies; plain
callables are wrapped with ``CallableRetryable``.
"""

from __future__ import annotations

__all__ = ["CallableRetryable", "Retryable", "as_retryable"]

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class Retryable(Protocol):
    """Protocol of an operation that can be retried.

    ``name`` is only used in diagnostic messages.
    """

    name: str

    def execute(self) -> Any: ...


class CallableRetryable:
    """Adapts a zero-argument callable to the ``Retryable`` protocol.

    Args:
        func: The callable to invoke on every attempt.
        name: Optional name. Defaults to the callable's qualified name.

    Example:
        ```pycon
        >>> from aretry.operation import CallableRetryable
        >>> def fetch():
        ...     return 42
        ...
        >>> retryable = CallableRetryable(fetch)
        >>> retryable.name
        'fetch'
        >>> retryable.execute()
        42

        ```
    """

    def __init__(self, func: Callable[[], Any], name: str | None = None) -> None:
        if not callable(func):
            msg = f"func must be callable, got {func!r}"
            raise TypeError(msg)
        self.func = func
        self.name = name if name is not None else _default_name(func)

    def execute(self) -> Any:
        return self.func()

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(name={self.name!r})"


def _default_name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or type(func).__qualname__


def as_retryable(operation: Retryable | Callable[[], Any], name: str | None = None) -> Retryable:
    """Return ``operation`` as a ``Retryable``.

    Objects already satisfying the protocol are returned unchanged unless
    a ``name`` is given; callables are wrapped in ``CallableRetryable``.

    Args:
        operation: A ``Retryable`` or a zero-argument callable.
        name: Optional name overriding the default one.

    Returns:
        The retryable operation.

    Raises:
        TypeError: If ``operation`` is neither retryable nor callable.
    """
    if isinstance(operation, Retryable) and name is None:
        return operation
    if isinstance(operation, Retryable):
        return CallableRetryable(operation.execute, name=name)
    return CallableRetryable(operation, name=name)
