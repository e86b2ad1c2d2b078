r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aretry.backoff.exponential import ExponentialBackoff


def test_exponential_backoff_basic() -> None:
    backoff = ExponentialBackoff(base_delay=0.5)
    assert backoff.calculate(0) == 0.5
    assert backoff.calculate(1) == 1.0
    assert backoff.calculate(2) == 2.0
    assert backoff.calculate(3) == 4.0


def test_exponential_backoff_default_values() -> None:
    backoff = ExponentialBackoff()
    assert backoff.base_delay == 0.3
    assert backoff.multiplier == 2.0
    assert backoff.max_delay is None
    assert backoff.jitter == 0.0
    assert backoff.max_attempts is None


def test_exponential_backoff_custom_multiplier() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, multiplier=3.0)
    assert [backoff.calculate(attempt) for attempt in range(4)] == [1.0, 3.0, 9.0, 27.0]


def test_exponential_backoff_max_delay() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
    assert backoff.calculate(2) == 4.0
    assert backoff.calculate(3) == 5.0
    assert backoff.calculate(10) == 5.0


def test_exponential_backoff_jitter() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, jitter=0.5)
    with patch("random.uniform", return_value=0.25) as mock_uniform:
        assert backoff.calculate(1) == 2.5
    mock_uniform.assert_called_once_with(0, 0.5)


def test_exponential_backoff_jitter_bounds() -> None:
    backoff = ExponentialBackoff(base_delay=1.0, jitter=0.1)
    for _ in range(50):
        assert 1.0 <= backoff.calculate(0) <= 1.1


def test_exponential_backoff_with_max_attempts() -> None:
    execution = ExponentialBackoff(base_delay=1.0, max_attempts=3).start()
    assert [execution.next_delay() for _ in range(4)] == [1.0, 2.0, 4.0, None]


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"base_delay": -1.0}, r"base_delay must be non-negative"),
        ({"max_delay": 0.0}, r"max_delay must be positive"),
        ({"multiplier": 0.5}, r"multiplier must be >= 1"),
        ({"jitter": -1.0}, r"jitter must be non-negative"),
        ({"max_attempts": -2}, r"max_attempts must be non-negative"),
    ],
)
def test_exponential_backoff_invalid(kwargs: dict, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        ExponentialBackoff(**kwargs)
