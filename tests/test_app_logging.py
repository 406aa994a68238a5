"""Tests for logging configuration."""

import logging

from chompquest.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("chompquest")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1


def test_configure_logging_sets_info_level_without_propagation() -> None:
    logger = logging.getLogger("chompquest")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

    configure_logging()

    assert logger.level == logging.INFO
    assert logger.propagate is False
