r"""Unit tests for RetryPolicy and RetryPolicyBuilder."""

from __future__ import annotations

import dataclasses
from datetime import timedelta

import pytest

from aretry import ExceptionClassifier, RetryPolicy
from aretry.backoff import ConstantBackoff, ExponentialBackoff, FixedBackoff
from aretry.config import DEFAULT_DELAY, DEFAULT_MAX_ATTEMPTS


def test_retry_policy_defaults() -> None:
    policy = RetryPolicy()
    assert policy.max_attempts == DEFAULT_MAX_ATTEMPTS
    assert policy.delay == DEFAULT_DELAY
    assert policy.backoff is None
    assert policy.classifier == ExceptionClassifier()


def test_retry_policy_with_defaults() -> None:
    assert RetryPolicy.with_defaults() == RetryPolicy()


def test_retry_policy_with_max_attempts() -> None:
    assert RetryPolicy.with_max_attempts(7).max_attempts == 7


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_retry_policy_invalid_max_attempts(max_attempts: int) -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        RetryPolicy(max_attempts=max_attempts)


def test_retry_policy_invalid_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be >= 0"):
        RetryPolicy(delay=-1.0)


def test_retry_policy_is_immutable() -> None:
    policy = RetryPolicy()
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.max_attempts = 10  # type: ignore[misc]


def test_retry_policy_synthesizes_fixed_backoff() -> None:
    backoff = RetryPolicy(max_attempts=2, delay=0.5).backoff_strategy
    assert isinstance(backoff, FixedBackoff)
    assert backoff.interval == 0.5
    assert backoff.max_attempts == 2


def test_retry_policy_start_backoff_is_fresh_per_call() -> None:
    policy = RetryPolicy(max_attempts=2, delay=0.0)
    first = policy.start_backoff()
    assert [first.next_delay(), first.next_delay(), first.next_delay()] == [0.0, 0.0, None]
    second = policy.start_backoff()
    assert second.next_delay() == 0.0


def test_retry_policy_explicit_backoff() -> None:
    backoff = FixedBackoff(interval=2.0, max_attempts=1)
    policy = RetryPolicy(max_attempts=5, backoff=backoff)
    execution = policy.start_backoff()
    assert policy.backoff_strategy is backoff
    assert execution.next_delay() == 2.0
    assert execution.next_delay() is None


def test_retry_policy_unbounded_backoff_uses_max_attempts() -> None:
    execution = RetryPolicy(max_attempts=1, backoff=ConstantBackoff(delay=0.1)).start_backoff()
    assert execution.next_delay() == 0.1
    assert execution.next_delay() is None


def test_retry_policy_should_retry_is_pure() -> None:
    policy = RetryPolicy.builder().includes(OSError).build()
    exc = ConnectionError()
    assert policy.should_retry(exc) is policy.should_retry(exc) is True


def test_retry_policy_merge() -> None:
    policy = RetryPolicy(max_attempts=3)
    merged = policy.merge(max_attempts=5, delay=None)
    assert merged.max_attempts == 5
    assert merged.delay == policy.delay
    assert policy.max_attempts == 3


def test_retry_policy_merge_keeps_explicit_backoff_on_none() -> None:
    backoff = ConstantBackoff(delay=0)
    policy = RetryPolicy(delay=0.5, backoff=backoff)
    assert policy.merge(backoff=None).backoff is backoff

    cleared = dataclasses.replace(policy, backoff=None)
    assert cleared.backoff is None
    assert isinstance(cleared.backoff_strategy, FixedBackoff)
    assert cleared.backoff_strategy.interval == 0.5


def test_builder_defaults() -> None:
    assert RetryPolicy.builder().build() == RetryPolicy()


def test_builder_max_attempts_and_delay() -> None:
    policy = RetryPolicy.builder().max_attempts(5).delay(timedelta(milliseconds=250)).build()
    assert policy.max_attempts == 5
    assert policy.delay == 0.25
    assert policy.backoff is None


def test_builder_includes_excludes_are_additive() -> None:
    policy = (
        RetryPolicy.builder()
        .includes(OSError)
        .includes(ValueError, KeyError)
        .excludes(FileNotFoundError)
        .excludes(UnicodeError)
        .build()
    )
    assert policy.classifier.includes == (OSError, ValueError, KeyError)
    assert policy.classifier.excludes == (FileNotFoundError, UnicodeError)


def test_builder_predicates_are_additive() -> None:
    def first(exc: BaseException) -> bool:
        return True

    def second(exc: BaseException) -> bool:
        return False

    policy = RetryPolicy.builder().predicate(first).predicate(second).build()
    assert policy.classifier.predicates == (first, second)
    assert not policy.should_retry(RuntimeError())


def test_builder_explicit_backoff() -> None:
    backoff = ConstantBackoff(delay=0.1)
    assert RetryPolicy.builder().backoff(backoff).build().backoff is backoff


def test_builder_backoff_conflicts_with_delay() -> None:
    builder = RetryPolicy.builder().backoff(ConstantBackoff()).delay(1.0).multiplier(2)
    with pytest.raises(ValueError, match=r"delay, multiplier cannot be combined"):
        builder.build()


def test_builder_exponential_backoff() -> None:
    policy = (
        RetryPolicy.builder()
        .max_attempts(4)
        .delay(0.1)
        .multiplier(3)
        .max_delay(timedelta(seconds=0.5))
        .build()
    )
    backoff = policy.backoff
    assert isinstance(backoff, ExponentialBackoff)
    assert backoff.max_attempts == 4
    execution = policy.start_backoff()
    delays = [execution.next_delay() for _ in range(5)]
    assert delays == [pytest.approx(0.1), pytest.approx(0.3), 0.5, 0.5, None]


def test_builder_jitter_only() -> None:
    backoff = RetryPolicy.builder().delay(1.0).jitter(0.1).build().backoff
    assert isinstance(backoff, ExponentialBackoff)
    assert backoff.jitter == 0.1
    assert backoff.multiplier == 2.0


def test_builder_invalid_max_attempts() -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        RetryPolicy.builder().max_attempts(0).build()
