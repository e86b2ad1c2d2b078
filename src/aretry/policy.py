r"""Retry policy and its builder.

A ``RetryPolicy`` combines the maximum number of retry attempts, a
backoff strategy and an exception classifier. Policies are immutable and
can be shared between any number of executions.
"""

from __future__ import annotations

__all__ = ["RetryPolicy", "RetryPolicyBuilder"]

from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.fixed import FixedBackoff
from aretry.classifier import ExceptionClassifier
from aretry.config import DEFAULT_DELAY, DEFAULT_MAX_ATTEMPTS, DEFAULT_MULTIPLIER
from aretry.validation import validate_policy_params

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.base import BackoffExecution, BaseBackoffStrategy


def _to_seconds(value: float | timedelta) -> float:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable configuration of a retry execution.

    Args:
        max_attempts: Maximum number of retry attempts, excluding the
            initial invocation. Must be >= 1.
        delay: Delay in seconds between two attempts, used to synthesize
            a ``FixedBackoff`` when ``backoff`` is not given.
        backoff: Optional explicit backoff strategy. When set, its own
            limit governs the number of retries; ``max_attempts`` only
            applies if the strategy is unbounded. Use
            ``dataclasses.replace(policy, backoff=None)`` to drop it again;
            ``merge`` ignores None overrides.
        classifier: Decides which failures are retried.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy
        >>> policy = RetryPolicy.builder().max_attempts(5).delay(0).includes(OSError).build()
        >>> policy.max_attempts
        5
        >>> policy.should_retry(TimeoutError())
        True
        >>> policy.should_retry(ValueError())
        False

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay: float = DEFAULT_DELAY
    backoff: BaseBackoffStrategy | None = None
    classifier: ExceptionClassifier = field(default_factory=ExceptionClassifier)

    def __post_init__(self) -> None:
        validate_policy_params(max_attempts=self.max_attempts, delay=self.delay)

    @staticmethod
    def builder() -> RetryPolicyBuilder:
        """Return a new builder for a ``RetryPolicy``."""
        return RetryPolicyBuilder()

    @classmethod
    def with_defaults(cls) -> RetryPolicy:
        """Return a policy with the default attempts and delay that
        retries every exception."""
        return cls()

    @classmethod
    def with_max_attempts(cls, max_attempts: int) -> RetryPolicy:
        """Return a default policy with a custom number of retry attempts."""
        return cls(max_attempts=max_attempts)

    @property
    def backoff_strategy(self) -> BaseBackoffStrategy:
        """The explicit backoff, or a ``FixedBackoff`` synthesized from
        ``delay`` and ``max_attempts``."""
        if self.backoff is not None:
            return self.backoff
        return FixedBackoff(interval=self.delay, max_attempts=self.max_attempts)

    def should_retry(self, exc: BaseException) -> bool:
        """Return whether ``exc`` is eligible for another attempt."""
        return self.classifier.matches(exc)

    def start_backoff(self) -> BackoffExecution:
        """Return a fresh backoff cursor for a single execution."""
        return self.backoff_strategy.start(max_attempts=self.max_attempts)

    def merge(self, **overrides: Any) -> RetryPolicy:
        """Create a new policy with specified parameters overridden.

        Only non-None override values are applied, so ``merge`` cannot
        clear an explicit ``backoff``. Use ``dataclasses.replace`` for
        that.

        Example:
            ```pycon
            >>> from aretry import RetryPolicy
            >>> policy = RetryPolicy(max_attempts=3)
            >>> policy.merge(max_attempts=5).max_attempts
            5
            >>> policy.max_attempts  # Original unchanged
            3

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)


class RetryPolicyBuilder:
    """Fluent builder for ``RetryPolicy``.

    Every method returns the builder itself. ``includes``, ``excludes``
    and ``predicate`` are additive: calling them several times
    accumulates the rules.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy
        >>> policy = (
        ...     RetryPolicy.builder()
        ...     .max_attempts(4)
        ...     .delay(0.1)
        ...     .multiplier(2)
        ...     .max_delay(1.0)
        ...     .excludes(KeyError)
        ...     .build()
        ... )
        >>> policy.start_backoff().next_delay()
        0.1

        ```
    """

    def __init__(self) -> None:
        self._max_attempts: int = DEFAULT_MAX_ATTEMPTS
        self._delay: float | None = None
        self._multiplier: float | None = None
        self._max_delay: float | None = None
        self._jitter: float | None = None
        self._backoff: BaseBackoffStrategy | None = None
        self._includes: list[type[BaseException]] = []
        self._excludes: list[type[BaseException]] = []
        self._predicates: list[Callable[[BaseException], bool]] = []

    def max_attempts(self, max_attempts: int) -> RetryPolicyBuilder:
        self._max_attempts = max_attempts
        return self

    def delay(self, delay: float | timedelta) -> RetryPolicyBuilder:
        self._delay = _to_seconds(delay)
        return self

    def multiplier(self, multiplier: float) -> RetryPolicyBuilder:
        self._multiplier = multiplier
        return self

    def max_delay(self, max_delay: float | timedelta) -> RetryPolicyBuilder:
        self._max_delay = _to_seconds(max_delay)
        return self

    def jitter(self, jitter: float) -> RetryPolicyBuilder:
        self._jitter = jitter
        return self

    def backoff(self, backoff: BaseBackoffStrategy) -> RetryPolicyBuilder:
        self._backoff = backoff
        return self

    def includes(self, *types: type[BaseException]) -> RetryPolicyBuilder:
        self._includes.extend(types)
        return self

    def excludes(self, *types: type[BaseException]) -> RetryPolicyBuilder:
        self._excludes.extend(types)
        return self

    def predicate(self, predicate: Callable[[BaseException], bool]) -> RetryPolicyBuilder:
        self._predicates.append(predicate)
        return self

    def build(self) -> RetryPolicy:
        """Build the policy.

        Raises:
            ValueError: If an explicit backoff is combined with delay
                shaping options, or if a parameter is invalid.
        """
        shaping = {
            "delay": self._delay,
            "multiplier": self._multiplier,
            "max_delay": self._max_delay,
            "jitter": self._jitter,
        }
        configured = sorted(name for name, value in shaping.items() if value is not None)
        delay = DEFAULT_DELAY if self._delay is None else self._delay
        backoff = self._backoff
        if backoff is not None and configured:
            msg = f"{', '.join(configured)} cannot be combined with an explicit backoff"
            raise ValueError(msg)
        if backoff is None and (
            self._multiplier is not None or self._max_delay is not None or self._jitter is not None
        ):
            backoff = ExponentialBackoff(
                base_delay=delay,
                multiplier=DEFAULT_MULTIPLIER if self._multiplier is None else self._multiplier,
                max_delay=self._max_delay,
                jitter=self._jitter or 0.0,
                max_attempts=self._max_attempts,
            )
        return RetryPolicy(
            max_attempts=self._max_attempts,
            delay=delay,
            backoff=backoff,
            classifier=ExceptionClassifier(
                includes=tuple(self._includes),
                excludes=tuple(self._excludes),
                predicates=tuple(self._predicates),
            ),
        )
