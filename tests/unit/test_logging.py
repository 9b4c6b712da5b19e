"""Unit tests for logging utilities."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

from ulfedit.core.commands import SetPixel
from ulfedit.core.history import CommandStack, HistoryEvent
from ulfedit.domain import Font, GlyphLayer
from ulfedit.utils import logging as ulf_logging
from ulfedit.utils.logging import EditStats, HistoryLogger, configure_logging


class TestEditStats:
    """Tests for EditStats."""

    def test_net_edits(self):
        """Test net edits count pushes and redos minus undos."""
        stats = EditStats(pushed_count=5, undone_count=3, redone_count=1)
        assert stats.net_edits == 3


class TestHistoryLogger:
    """Tests for the HistoryLogger listener."""

    def test_counts_events(self):
        """Test history events update the stats and are logged."""
        logger = MagicMock()
        history_logger = HistoryLogger(logger)

        history_logger(HistoryEvent("push", "Edit base pixel", 1, False))
        history_logger(HistoryEvent("push", "Add map block", 2, False))
        history_logger(HistoryEvent("undo", "Add map block", 1, False))
        history_logger(HistoryEvent("redo", "Add map block", 2, False))
        history_logger(HistoryEvent("clean", "", 2, True))

        stats = history_logger.stats
        assert (stats.pushed_count, stats.undone_count, stats.redone_count) == (2, 1, 1)
        assert logger.debug.call_count == 5

    def test_merged_push_not_counted(self):
        """Test a merged pixel edit leaves net edits at zero after one undo."""
        history = CommandStack(Font())
        history_logger = HistoryLogger(MagicMock())
        history.subscribe(history_logger)

        history.push(SetPixel.capture(history.font, GlyphLayer.BASE, 0, 1, 1, 1))
        history.push(SetPixel.capture(history.font, GlyphLayer.BASE, 0, 1, 1, 0))
        history.undo()

        assert history_logger.stats.pushed_count == 1
        assert history_logger.stats.net_edits == 0

    def test_log_save(self):
        """Test saves are counted."""
        logger = MagicMock()
        history_logger = HistoryLogger(logger)
        history_logger.log_save(Path("font.ulf"))
        assert history_logger.stats.save_count == 1
        logger.info.assert_called_once_with("Font saved", path="font.ulf")

    def test_log_failure(self):
        """Test failures are logged at error level with the error type."""
        logger = MagicMock()
        HistoryLogger(logger).log_failure("open", Path("x.ulf"), FileNotFoundError("gone"))
        _, kwargs = logger.error.call_args
        assert kwargs["operation"] == "open"
        assert kwargs["error_type"] == "FileNotFoundError"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_handlers_replaced(self, tmp_path):
        """Test repeated configuration does not stack handlers."""
        root = logging.getLogger()

        configure_logging(log_file=tmp_path / "a.log")
        first = list(ulf_logging._installed_handlers)
        configure_logging(log_file=tmp_path / "b.log")

        assert len(ulf_logging._installed_handlers) == 2
        assert not any(handler in root.handlers for handler in first)
        assert all(handler in root.handlers for handler in ulf_logging._installed_handlers)

        configure_logging()
        assert len(ulf_logging._installed_handlers) == 1

    def test_file_output(self, tmp_path):
        """Test log records reach the log file."""
        log_file = tmp_path / "ulfedit.log"
        configure_logging(log_file=log_file, file_level="DEBUG")
        for handler in ulf_logging._installed_handlers:
            handler.flush()
        assert "Logging initialized" in log_file.read_text(encoding="utf-8")

    def test_quiet_console(self):
        """Test quiet mode raises the console handler to ERROR."""
        configure_logging(console_level="DEBUG", quiet=True)
        (console_handler,) = ulf_logging._installed_handlers
        assert console_handler.level == logging.ERROR
