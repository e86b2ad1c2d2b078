r"""Parameter validation utilities for retry policies and backoff
strategies.

This module provides validation functions for retry parameters to
ensure they meet the required constraints before a policy or a backoff
strategy is built.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_policy_params"]


def validate_policy_params(max_attempts: int, delay: float) -> None:
    """Validate retry policy parameters.

    Args:
        max_attempts: Maximum number of retry attempts, excluding the
            initial invocation. Must be >= 1.
        delay: Delay in seconds between two attempts. Must be >= 0.

    Raises:
        ValueError: If ``max_attempts`` is lower than 1 or ``delay`` is
            negative.

    Example:
        ```pycon
        >>> from aretry.validation import validate_policy_params
        >>> validate_policy_params(max_attempts=3, delay=0.0)
        >>> validate_policy_params(max_attempts=0, delay=1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {max_attempts!r}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    if delay < 0:
        msg = f"delay must be >= 0, got {delay}"
        raise ValueError(msg)


def validate_backoff_params(
    base_delay: float,
    max_delay: float | None = None,
    max_attempts: int | None = None,
    jitter: float = 0.0,
) -> None:
    """Validate backoff strategy parameters.

    Args:
        base_delay: The base delay in seconds. Must be non-negative.
        max_delay: Optional maximum delay cap. Must be positive if specified.
        max_attempts: Optional number of delays the strategy hands out
            before signaling stop. Must be non-negative if specified.
        jitter: Jitter factor. Must be non-negative.

    Raises:
        ValueError: If any parameter fails validation.
    """
    if base_delay < 0:
        msg = f"base_delay must be non-negative, got {base_delay}"
        raise ValueError(msg)
    if max_delay is not None and max_delay <= 0:
        msg = f"max_delay must be positive if specified, got {max_delay}"
        raise ValueError(msg)
    if max_attempts is not None and max_attempts < 0:
        msg = f"max_attempts must be non-negative if specified, got {max_attempts}"
        raise ValueError(msg)
    if jitter < 0:
        msg = f"jitter must be non-negative, got {jitter}"
        raise ValueError(msg)
