from __future__ import annotations

import logging
import sys

import httpx

import aretry
from aretry.http import HttpRetryable, http_retry_policy

logger: logging.Logger = logging.getLogger(__name__)


def check_execute() -> None:
    logger.info("Checking execute...")
    outcomes = iter([ConnectionError("Boom!"), "ok"])

    def operation() -> str:
        outcome = next(outcomes)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    template = aretry.RetryTemplate(aretry.RetryPolicy(max_attempts=1, delay=0))
    assert template.execute(operation) == "ok"


def check_exhaustion() -> None:
    logger.info("Checking exhaustion...")
    template = aretry.RetryTemplate(aretry.RetryPolicy(max_attempts=2, delay=0))
    try:
        template.execute(aretry.CallableRetryable(lambda: 1 / 0, name="divide"))
    except aretry.RetryError as err:
        assert len(err.history) == 2
        assert isinstance(err.cause, ZeroDivisionError)
    else:
        msg = "RetryError was not raised"
        raise AssertionError(msg)


def check_http() -> None:
    logger.info("Checking http...")
    statuses = iter([503, 200])
    transport = httpx.MockTransport(lambda request: httpx.Response(next(statuses)))
    template = aretry.RetryTemplate(http_retry_policy(max_attempts=1, delay=0))
    with httpx.Client(transport=transport) as client:
        response = template.execute(HttpRetryable(client, "GET", "https://example.com"))
    assert response.status_code == 200


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_execute()
        check_exhaustion()
        check_http()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
