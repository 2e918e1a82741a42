"""
Tests for the logging setup.
"""

import logging

import pytest

from user_directory.app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    """Package logger, restored to its previous level and handlers afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_applied_when_root_configured(self, package_logger):
        """The level takes effect even if the root logger already has handlers."""
        root = logging.getLogger()
        marker = logging.NullHandler()
        root.addHandler(marker)
        try:
            setup_logging("DEBUG")
            assert package_logger.level == logging.DEBUG

            setup_logging("warning")
            assert package_logger.level == logging.WARNING
        finally:
            root.removeHandler(marker)

    def test_unknown_level_falls_back_to_info(self, package_logger):
        """An unrecognised level name means INFO."""
        setup_logging("chatty")

        assert package_logger.level == logging.INFO

    def test_file_handler_attached_once(self, package_logger, tmp_path):
        """Repeated calls with the same file add a single handler."""
        logfile = tmp_path / "directory.log"

        setup_logging("INFO", str(logfile))
        setup_logging("INFO", str(logfile))

        file_handlers = [h for h in package_logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1

        logging.getLogger("user_directory.app.services.user_store").info("written")
        file_handlers[0].flush()
        assert "written" in logfile.read_text(encoding="utf-8")
