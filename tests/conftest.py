from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry import RetryListener, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def retry_policy() -> RetryPolicy:
    """Create a policy with 3 retry attempts and no delay."""
    return RetryPolicy.builder().max_attempts(3).delay(0).build()


@pytest.fixture
def mock_listener() -> Mock:
    """Create a mock listener recording every hook call in order.

    Example:
        >>> def test_listener(mock_listener):
        ...     RetryTemplate(listener=mock_listener).execute(operation)
        ...     assert mock_listener.mock_calls == []
    """
    return Mock(spec=RetryListener)
