"""Tests for dhpii_client/utils/logging.py -- handler levels and re-setup."""

import logging

import pytest

from dhpii_client.utils.logging import setup_logging, get_logger


def _console_handler(logger):
    # FileHandler is itself a StreamHandler
    return next(
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    )


@pytest.fixture
def configured(tmp_path):
    created = []

    def _setup(debug=False):
        logger = setup_logging(tmp_path, debug=debug)
        created.append(logger)
        return logger

    yield _setup
    for logger in created:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


class TestSetupLogging:
    def test_console_shows_errors_only_by_default(self, configured):
        logger = configured()

        assert _console_handler(logger).level == logging.ERROR

    def test_debug_opens_up_the_console(self, configured):
        logger = configured(debug=True)

        assert _console_handler(logger).level == logging.DEBUG

    def test_file_handler_is_always_detailed(self, configured, tmp_path):
        logger = configured()

        file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))
        assert file_handler.level == logging.DEBUG
        assert file_handler.baseFilename == str(tmp_path / "logs" / "dhpii.log")

    def test_repeated_setup_does_not_stack_handlers(self, configured):
        configured()
        logger = configured(debug=True)

        assert len(logger.handlers) == 2
        assert _console_handler(logger).level == logging.DEBUG

    def test_module_loggers_are_children(self, configured):
        configured()

        assert get_logger("client").parent is logging.getLogger("dhpii_client")
