r"""Default configuration values for retry policies.

This module centralizes the defaults used when a ``RetryPolicy`` is
built without explicit values.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MULTIPLIER",
    "RETRY_STATUS_CODES",
]

# Default maximum number of retry attempts
# Total invocations = max_attempts + 1 (initial attempt)
DEFAULT_MAX_ATTEMPTS = 3

# Default delay in seconds between two attempts
DEFAULT_DELAY = 1.0

# Default multiplier applied to the delay by exponential backoff
DEFAULT_MULTIPLIER = 2.0

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)
