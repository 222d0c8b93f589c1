"""
Test suite for logging utilities.

System role: Verification of observability helpers
"""

import logging

import pytest

from ragchat.observability.correlation import (
    CorrelationIdFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from ragchat.observability.log_utils import log_latency, safe_log_value


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_should_truncate_long_strings(self) -> None:
        value = safe_log_value("x" * 20, max_length=5)

        assert value.startswith("xxxxx... (truncated")

    def test_should_summarize_collections(self) -> None:
        assert safe_log_value([1, 2, 3]) == "list(3 items)"
        assert safe_log_value({"a": 1}) == "dict(1 keys)"

    def test_should_handle_none(self) -> None:
        assert safe_log_value(None) == "None"


class TestLogLatency:
    """Test suite for log_latency decorator."""

    def test_sync_function_should_log_success(self, caplog) -> None:
        @log_latency("unit.sync")
        def work():
            return 42

        with caplog.at_level(logging.INFO):
            assert work() == 42

        assert "unit.sync | latency_ms=" in caplog.text
        assert "status=success" in caplog.text

    @pytest.mark.asyncio
    async def test_async_function_should_log_error_and_reraise(self, caplog) -> None:
        @log_latency("unit.async")
        async def fail():
            raise RuntimeError("boom")

        with caplog.at_level(logging.INFO):
            with pytest.raises(RuntimeError):
                await fail()

        assert "unit.async" in caplog.text
        assert "status=error" in caplog.text
        assert "RuntimeError" in caplog.text


class TestCorrelationId:
    """Test suite for correlation ID helpers."""

    def test_set_should_generate_id_when_missing(self) -> None:
        value = set_correlation_id()

        assert value
        assert get_correlation_id() == value
        clear_correlation_id()

    def test_filter_should_attach_id(self) -> None:
        # Arrange
        set_correlation_id("req-1")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)

        # Act
        CorrelationIdFilter().filter(record)

        # Assert
        assert record.correlation_id == "req-1"
        clear_correlation_id()
