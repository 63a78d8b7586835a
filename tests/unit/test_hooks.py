"""Unit tests for failed attempt logging."""

import logging

import pytest

from retryable.resilience import conditions, engine
from retryable.resilience.engine import retry
from retryable.resilience.hooks import log_failed_attempts


class TestLogFailedAttempts:
    """Test the logging callback."""

    def test_logs_error(self, caplog):
        callback = log_failed_attempts(name="fetch")

        with caplog.at_level(logging.WARNING, logger="retryable.resilience.hooks"):
            callback(1, 2, None, ConnectionError("refused"))

        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "Attempt 1 of 'fetch' failed" in message
        assert "2 retries left" in message
        assert "ConnectionError: refused" in message

    def test_logs_result(self, caplog):
        callback = log_failed_attempts()

        with caplog.at_level(logging.WARNING, logger="retryable.resilience.hooks"):
            callback(3, 0, 429, None)

        message = caplog.records[0].getMessage()
        assert "Attempt 3 of operation returned 429" in message

    def test_custom_logger_and_level(self, caplog):
        log = logging.getLogger("tests.retry")
        callback = log_failed_attempts(log, level=logging.INFO)

        with caplog.at_level(logging.INFO, logger="tests.retry"):
            callback(1, 1, None, ValueError("x"))

        assert caplog.records[0].name == "tests.retry"
        assert caplog.records[0].levelno == logging.INFO

    @pytest.mark.asyncio
    async def test_used_as_engine_callback(self, caplog, monkeypatch):
        async def fake_wait(duration_ms):
            pass

        monkeypatch.setattr(engine, "wait", fake_wait)

        async def failing():
            raise TimeoutError("slow")

        with caplog.at_level(logging.WARNING, logger="retryable.resilience.hooks"):
            with pytest.raises(TimeoutError):
                await retry(
                    failing,
                    retry_when=conditions.on_any_error(),
                    max_retries=2,
                    on_failed_attempt=log_failed_attempts(name="failing"),
                )

        assert len(caplog.records) == 3
