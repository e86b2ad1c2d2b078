r"""aretry - Retry execution engine with pluggable backoff and exception
classification.

This package re-invokes an operation that may fail according to a
configurable policy: a maximum number of retry attempts, a backoff
strategy deciding how long to wait between attempts, and exception
classification rules deciding which failures are worth retrying.
Listeners observe the retry lifecycle, and when retrying stops without
success a single ``RetryError`` carries the full failure history.

Key Features:
    - Immutable retry policies assembled with a fluent builder
    - Include/exclude exception types and custom predicates
    - Fixed, constant, exponential, linear and Fibonacci backoff strategies
    - Listener hooks before each retry and on success, failure and exhaustion
    - Synchronous and asyncio engines, plus a ``@retryable`` decorator
    - Retryable HTTP requests built on httpx

Example:
    ```pycon
    >>> from aretry import RetryPolicy, RetryTemplate
    >>> policy = RetryPolicy.builder().max_attempts(3).delay(0).includes(OSError).build()
    >>> template = RetryTemplate(policy)
    >>> template.execute(lambda: "always succeeds")
    'always succeeds'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryTemplate",
    "CallableRetryable",
    "CompositeRetryListener",
    "ExceptionClassifier",
    "LoggingRetryListener",
    "RetryError",
    "RetryListener",
    "RetryPolicy",
    "RetryPolicyBuilder",
    "RetryTemplate",
    "Retryable",
    "__version__",
    "as_retryable",
    "retryable",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.classifier import ExceptionClassifier
from aretry.decorators import retryable
from aretry.exceptions import RetryError
from aretry.listener import CompositeRetryListener, LoggingRetryListener, RetryListener
from aretry.operation import CallableRetryable, Retryable, as_retryable
from aretry.policy import RetryPolicy, RetryPolicyBuilder
from aretry.template import RetryTemplate
from aretry.template_async import AsyncRetryTemplate

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
