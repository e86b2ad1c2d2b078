r"""Retryable HTTP requests built on httpx.

This module wraps httpx requests as retryable operations and provides an
exception predicate that retries transport errors and transient status
codes (429, 500, 502, 503, 504 by default).

Example:
    ```pycon
    >>> import httpx
    >>> from aretry import RetryTemplate
    >>> from aretry.http import HttpRetryable, http_retry_policy
    >>> template = RetryTemplate(http_retry_policy(max_attempts=3, delay=0.5))
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     response = template.execute(
    ...         HttpRetryable(client, "GET", "https://api.example.com/data")
    ...     )
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncHttpRetryable",
    "HttpRetryable",
    "http_retry_policy",
    "is_retryable_http_error",
]

import functools
import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.config import DEFAULT_DELAY, DEFAULT_MAX_ATTEMPTS, RETRY_STATUS_CODES
from aretry.policy import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger(__name__)


def is_retryable_http_error(
    exc: BaseException, status_forcelist: Iterable[int] = RETRY_STATUS_CODES
) -> bool:
    """Return whether an httpx failure is worth retrying.

    Transport errors (timeouts, connection errors, ...) are always
    retryable. Status errors are retryable when their status code is in
    ``status_forcelist``. Any other exception is not.

    Args:
        exc: The failure to inspect.
        status_forcelist: Retryable HTTP status codes.

    Returns:
        True if the request should be retried.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.http import is_retryable_http_error
        >>> is_retryable_http_error(httpx.ConnectTimeout("timed out"))
        True
        >>> is_retryable_http_error(ValueError())
        False

        ```
    """
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in tuple(status_forcelist)
    return False


def http_retry_policy(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay: float = DEFAULT_DELAY,
    status_forcelist: Iterable[int] = RETRY_STATUS_CODES,
) -> RetryPolicy:
    """Build a policy that retries transient httpx failures.

    Args:
        max_attempts: Maximum number of retry attempts.
        delay: Delay in seconds between two attempts.
        status_forcelist: Retryable HTTP status codes.

    Returns:
        The retry policy.
    """
    codes = tuple(status_forcelist)
    return (
        RetryPolicy.builder()
        .max_attempts(max_attempts)
        .delay(delay)
        .predicate(functools.partial(is_retryable_http_error, status_forcelist=codes))
        .build()
    )


class HttpRetryable:
    """HTTP request performed with an ``httpx.Client`` on every attempt.

    Error responses (status >= 400) are turned into
    ``httpx.HTTPStatusError`` so that the retry policy can classify them.

    Args:
        client: The client used to send the request.
        method: The HTTP method (e.g., "GET", "POST").
        url: The URL to request.
        **kwargs: Additional keyword arguments passed to ``client.request``.
    """

    def __init__(self, client: httpx.Client, method: str, url: str, **kwargs: Any) -> None:
        self.client = client
        self.method = method.upper()
        self.url = url
        self.kwargs = kwargs
        self.name = f"{self.method} {url}"

    def execute(self) -> httpx.Response:
        response = self.client.request(self.method, self.url, **self.kwargs)
        if response.status_code >= 400:
            logger.debug(f"{self.name} failed with status {response.status_code}")
            response.raise_for_status()
        return response


class AsyncHttpRetryable:
    """HTTP request performed with an ``httpx.AsyncClient`` on every
    attempt.

    Args:
        client: The async client used to send the request.
        method: The HTTP method (e.g., "GET", "POST").
        url: The URL to request.
        **kwargs: Additional keyword arguments passed to ``client.request``.
    """

    def __init__(self, client: httpx.AsyncClient, method: str, url: str, **kwargs: Any) -> None:
        self.client = client
        self.method = method.upper()
        self.url = url
        self.kwargs = kwargs
        self.name = f"{self.method} {url}"

    async def execute(self) -> httpx.Response:
        response = await self.client.request(self.method, self.url, **self.kwargs)
        if response.status_code >= 400:
            logger.debug(f"{self.name} failed with status {response.status_code}")
            response.raise_for_status()
        return response
