"""Unit tests for logging helpers."""

import io
import logging

import pytest

import money.utils.logging as money_logging
from money.utils.logging import get_logger, setup_logging


@pytest.fixture()
def clean_package_logger():
    """Restore the package logger after ``setup_logging`` touched it."""
    logger = logging.getLogger("money")
    level, propagate = logger.level, logger.propagate
    yield logger
    if money_logging._handler is not None:
        logger.removeHandler(money_logging._handler)
        money_logging._handler = None
    logger.setLevel(level)
    logger.propagate = propagate


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("foo").name == "money.foo"

    def test_package_modules_not_prefixed_twice(self):
        assert get_logger("money.filters.order").name == "money.filters.order"
        assert get_logger("money").name == "money"


class TestSetupLogging:
    def test_writes_to_stream(self, clean_package_logger):
        stream = io.StringIO()
        setup_logging("debug", fmt="%(levelname)s %(name)s %(message)s", stream=stream)
        get_logger("money.services").debug("Loaded %d orders", 3)
        assert stream.getvalue() == "DEBUG money.services Loaded 3 orders\n"

    def test_idempotent(self, clean_package_logger):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        setup_logging("WARNING", stream=stream)
        assert len(clean_package_logger.handlers) == 1
        assert clean_package_logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, clean_package_logger):
        setup_logging("chatty", stream=io.StringIO())
        assert clean_package_logger.level == logging.INFO
