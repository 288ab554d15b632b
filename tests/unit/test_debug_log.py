"""Unit tests for debug logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from lanesync.debug_log import (
    LaneSyncLogger,
    LogSource,
    export_logs_to_file,
    log_buffer,
    setup_debug_logging,
)
from lanesync.limits import MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


class TestLogTruncation:
    """Tests for log message truncation."""

    def test_log_truncates_oversized_messages(self):
        """Very large log messages are truncated."""
        log_buffer.clear()
        logger = LaneSyncLogger()

        logger.info("x" * 10000)

        assert len(log_buffer) == 1
        logged_message = log_buffer[0].message
        assert len(logged_message) <= MAX_LOG_MESSAGE_LENGTH + 20
        assert "... [truncated]" in logged_message

    def test_log_truncates_at_exact_boundary(self):
        """Messages exactly at the limit are kept whole."""
        log_buffer.clear()
        LaneSyncLogger().info("y" * MAX_LOG_MESSAGE_LENGTH)

        assert log_buffer[0].message == "y" * MAX_LOG_MESSAGE_LENGTH


class TestLogFormatting:
    def test_keyword_context_is_appended(self):
        log_buffer.clear()
        LaneSyncLogger().warning("Status sync failed", card_id="A", status="in-progress")

        entry = log_buffer[0]
        assert entry.group == "WARNING"
        assert entry.message == "Status sync failed card_id='A' status='in-progress'"
        assert entry.source is LogSource.TEXTUAL

    def test_call_logs_at_info(self):
        log_buffer.clear()
        LaneSyncLogger()("hello")
        assert log_buffer[0].group == "INFO"


class TestStdlibCapture:
    def test_package_records_land_in_buffer(self):
        setup_debug_logging()
        log_buffer.clear()

        logging.getLogger("lanesync.core.board").warning("Dropping duplicate card id %s", "A")

        assert any(
            entry.source is LogSource.LOGGING and "Dropping duplicate card id A" in entry.message
            for entry in log_buffer
        )


class TestBufferManagement:
    def test_buffer_is_bounded(self):
        log_buffer.clear()
        logger = LaneSyncLogger()
        for index in range(log_buffer.maxlen + 5):
            logger.debug(f"entry {index}")

        assert len(log_buffer) == log_buffer.maxlen
        assert log_buffer[0].message == "entry 5"

    def test_export(self, tmp_path: Path):
        log_buffer.clear()
        LaneSyncLogger().error("Drop failed", card_id="B")

        target = tmp_path / "logs" / "debug.log"
        written = export_logs_to_file(str(target))

        assert written == 1
        content = target.read_text()
        assert "[ERROR] Drop failed card_id='B'" in content
        assert "[TX]" in content
        assert "# Total entries: 1" in content
