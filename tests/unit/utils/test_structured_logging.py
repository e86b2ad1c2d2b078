from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from aretry import RetryPolicy, RetryTemplate
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    correlation_scope,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)


@pytest.fixture
def stream_logger() -> tuple[logging.Logger, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry.tests.structured")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, stream


def read_records(stream: StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


##############################################
#     Tests for correlation ID management    #
##############################################


def test_correlation_id_initially_none() -> None:
    clear_correlation_id()
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("test-123")
    assert get_correlation_id() == "test-123"
    clear_correlation_id()
    assert get_correlation_id() is None


def test_correlation_scope_restores_previous_value() -> None:
    set_correlation_id("outer")
    with correlation_scope("inner") as value:
        assert value == "inner"
        assert get_correlation_id() == "inner"
    assert get_correlation_id() == "outer"
    clear_correlation_id()


##############################################
#     Tests for StructuredFormatter          #
##############################################


def test_structured_formatter_standard_fields(stream_logger: tuple) -> None:
    logger, stream = stream_logger
    logger.info("hello %s", "world")

    (record,) = read_records(stream)
    assert record["message"] == "hello world"
    assert record["level"] == "INFO"
    assert record["logger"] == "aretry.tests.structured"
    assert record["timestamp"].endswith("Z")
    assert "correlation_id" not in record


def test_structured_formatter_correlation_id(stream_logger: tuple) -> None:
    logger, stream = stream_logger
    with correlation_scope("job-42"):
        logger.info("tracked")

    assert read_records(stream)[0]["correlation_id"] == "job-42"


def test_structured_formatter_extra_fields(stream_logger: tuple) -> None:
    logger, stream = stream_logger
    log_structured(logger, logging.WARNING, "attempt failed", operation="fetch", attempt=2)

    (record,) = read_records(stream)
    assert record["operation"] == "fetch"
    assert record["attempt"] == 2
    assert record["level"] == "WARNING"


def test_structured_formatter_non_serializable_extra(stream_logger: tuple) -> None:
    logger, stream = stream_logger
    logger.info("with object", extra={"error": ValueError("Boom!")})

    assert read_records(stream)[0]["error"] == "ValueError('Boom!')"


def test_structured_formatter_exception(stream_logger: tuple) -> None:
    logger, stream = stream_logger
    try:
        msg = "Boom!"
        raise RuntimeError(msg)
    except RuntimeError:
        logger.exception("failed")

    assert "RuntimeError: Boom!" in read_records(stream)[0]["exception"]


def test_retry_template_logs_structured_fields(caplog: pytest.LogCaptureFixture) -> None:
    attempts = iter([ConnectionError(), "ok"])

    def operation() -> str:
        outcome = next(attempts)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    with caplog.at_level(logging.DEBUG, logger="aretry.template"):
        RetryTemplate(RetryPolicy(delay=0)).execute(operation)

    formatter = StructuredFormatter()
    records = [json.loads(formatter.format(record)) for record in caplog.records]
    assert [record["attempt"] for record in records] == [0, 1]
    assert {record["operation"] for record in records} == {
        "test_retry_template_logs_structured_fields.<locals>.operation"
    }
