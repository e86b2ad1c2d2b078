r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

import pytest

from aretry.backoff.constant import ConstantBackoff


def test_constant_backoff_basic() -> None:
    backoff = ConstantBackoff(delay=2.5)
    assert backoff.calculate(0) == 2.5
    assert backoff.calculate(10) == 2.5
    assert backoff.calculate(100) == 2.5


def test_constant_backoff_default_values() -> None:
    backoff = ConstantBackoff()
    assert backoff.delay == 1.0
    assert backoff.max_attempts is None


def test_constant_backoff_with_max_attempts() -> None:
    execution = ConstantBackoff(delay=0.0, max_attempts=2).start()
    assert [execution.next_delay() for _ in range(3)] == [0.0, 0.0, None]


def test_constant_backoff_invalid_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative"):
        ConstantBackoff(delay=-1.0)
