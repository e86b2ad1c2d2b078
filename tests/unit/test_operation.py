r"""Unit tests for retryable operations."""

from __future__ import annotations

import functools

import pytest

from aretry.operation import CallableRetryable, Retryable, as_retryable


class Fetch:
    name = "fetch"

    def execute(self) -> str:
        return "data"


def load() -> int:
    return 1


def test_callable_retryable_default_name() -> None:
    retryable = CallableRetryable(load)
    assert retryable.name == "load"
    assert retryable.execute() == 1


def test_callable_retryable_custom_name() -> None:
    assert CallableRetryable(load, name="loader").name == "loader"


def test_callable_retryable_partial_name() -> None:
    assert CallableRetryable(functools.partial(load)).name == "partial"


def test_callable_retryable_not_callable() -> None:
    with pytest.raises(TypeError, match=r"func must be callable"):
        CallableRetryable(42)  # type: ignore[arg-type]


def test_callable_retryable_repr() -> None:
    assert repr(CallableRetryable(load)) == "CallableRetryable(name='load')"


def test_retryable_protocol() -> None:
    assert isinstance(Fetch(), Retryable)
    assert isinstance(CallableRetryable(load), Retryable)
    assert not isinstance(load, Retryable)


def test_as_retryable_returns_retryable_unchanged() -> None:
    fetch = Fetch()
    assert as_retryable(fetch) is fetch


def test_as_retryable_renames_retryable() -> None:
    retryable = as_retryable(Fetch(), name="renamed")
    assert retryable.name == "renamed"
    assert retryable.execute() == "data"


def test_as_retryable_wraps_callable() -> None:
    retryable = as_retryable(load)
    assert isinstance(retryable, CallableRetryable)
    assert retryable.execute() == 1
