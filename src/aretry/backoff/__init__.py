r"""Backoff strategies for retry delays.

This package provides various backoff strategies for calculating retry
delays, including fixed, constant, exponential, linear and Fibonacci
backoff patterns, and the per-execution cursor they hand out.
"""

from __future__ import annotations

__all__ = [
    "BackoffExecution",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "FixedBackoff",
    "LinearBackoff",
]

from aretry.backoff.base import BackoffExecution, BaseBackoffStrategy
from aretry.backoff.constant import ConstantBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.fibonacci import FibonacciBackoff
from aretry.backoff.fixed import FixedBackoff
from aretry.backoff.linear import LinearBackoff
