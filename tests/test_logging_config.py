"""Tests for logging setup and problem reporting."""

import logging
from pathlib import Path

from wiki_export.config import LoggingSettings
from wiki_export.logging_config import get_logger, report_problem, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_and_file(self, workspace: Path) -> None:
        """The package logger gets the level and a file handler."""
        settings = LoggingSettings(level="INFO", file=str(workspace / "logs" / "export.log"))

        setup_logging(settings)
        logger = logging.getLogger("wiki_export")

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2
        assert (workspace / "logs").is_dir()

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_verbose(self) -> None:
        """Verbose forces DEBUG."""
        setup_logging(LoggingSettings(level="ERROR"), verbose=True)
        logger = logging.getLogger("wiki_export")

        assert logger.level == logging.DEBUG
        logger.handlers.clear()


class TestReportProblem:
    """Tests for report_problem."""

    def test_logged_and_kept(self, caplog) -> None:
        """The message is logged and appended."""
        problems = []
        logger = logging.getLogger("wiki_export.test")

        with caplog.at_level(logging.WARNING, logger="wiki_export"):
            problem = report_problem(logger, logging.ERROR, "No .order file in 'x'", problems)

        assert problems == [problem]
        assert problem.level == logging.ERROR
        assert "No .order file in 'x'" in caplog.text


class TestGetLogger:
    """Tests for get_logger."""

    def test_module_name(self) -> None:
        """A module's __name__ is used as is."""
        assert get_logger("wiki_export.traverser").name == "wiki_export.traverser"

    def test_short_name(self) -> None:
        """Short names go below the package logger."""
        assert get_logger("attachments").name == "wiki_export.attachments"

    def test_records_reach_package_handlers(self, caplog) -> None:
        """Module loggers propagate to the package logger."""
        with caplog.at_level(logging.WARNING, logger="wiki_export"):
            get_logger("exporter").warning("Attachment 'x.png' not found")

        assert caplog.records[0].name == "wiki_export.exporter"
        assert "x.png" in caplog.text
