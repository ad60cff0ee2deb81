"""
Unit tests for HashgenLogger and NullLogger.
"""

import logging

from hashgen.core.models.config import LoggingConfig
from hashgen.services.logging import HashgenLogger, NullLogger


class TestHashgenLogger:
    """Tests for the stdlib logging wrapper."""

    def test_no_handlers_by_default(self):
        logger = HashgenLogger(name="hashgen.test.default")
        assert logger.handlers == []
        assert logger.level == logging.WARNING

    def test_console_output(self, capsys):
        logger = HashgenLogger(
            LoggingConfig(level="debug", console=True), name="hashgen.test.console"
        )

        logger.debug("registered %s", "md5")

        err = capsys.readouterr().err
        assert "[DEBUG] hashgen.test.console: registered md5" in err

    def test_level_filters_messages(self, capsys):
        logger = HashgenLogger(LoggingConfig(console=True), name="hashgen.test.level")

        logger.debug("hidden")
        logger.warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_file_output(self, tmp_path):
        log_file = tmp_path / "logs" / "hashgen.log"
        logger = HashgenLogger(
            LoggingConfig(file=True), name="hashgen.test.file", log_file=log_file
        )

        logger.warning("ignored config %s", "pyproject.toml")
        for handler in logger.handlers:
            handler.flush()

        assert "[WARNING] hashgen.test.file: ignored config pyproject.toml" in log_file.read_text()

    def test_rebuilding_replaces_handlers(self):
        config = LoggingConfig(console=True)
        HashgenLogger(config, name="hashgen.test.rebuild")

        logger = HashgenLogger(config, name="hashgen.test.rebuild")

        assert len(logger.handlers) == 1

    def test_does_not_propagate(self):
        HashgenLogger(name="hashgen.test.propagate")
        assert logging.getLogger("hashgen.test.propagate").propagate is False


class TestNullLogger:
    """Tests for the no-op logger."""

    def test_accepts_all_calls(self, capsys):
        logger = NullLogger()
        logger.debug("a %s", 1)
        logger.warning("b")
        assert capsys.readouterr().err == ""
