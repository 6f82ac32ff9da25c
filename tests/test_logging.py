"""Tests for the logging helpers."""

import logging

import pytest

from cf_lite.utils.logging import LogLevel, get_logger, log_exception


def test_logger_names_are_prefixed():
    assert get_logger("engine").name == "cf-lite.engine"
    assert get_logger("cf-lite.api").name == "cf-lite.api"
    assert get_logger("__main__").name == "cf-lite"


def test_error_level_attaches_traceback(caplog):
    logger = get_logger("tests.errors")
    error = ValueError("boom")

    with caplog.at_level(logging.DEBUG, logger="cf-lite"):
        log_exception(logger, "Loading failed", error, extra={"path": "/recommend"})

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "Loading failed: boom"
    assert record.exc_info[1] is error
    assert record.path == "/recommend"


@pytest.mark.parametrize("level, expected", [(LogLevel.WARNING, logging.WARNING), (LogLevel.INFO, logging.INFO)])
def test_lower_levels_skip_traceback(caplog, level, expected):
    logger = get_logger("tests.warnings")

    with caplog.at_level(logging.DEBUG, logger="cf-lite"):
        log_exception(logger, "Bad input", ValueError("k must be positive"), level=level)

    record = caplog.records[-1]
    assert record.levelno == expected
    assert record.exc_info is None


def test_message_without_exception(caplog):
    logger = get_logger("tests.plain")

    with caplog.at_level(logging.DEBUG, logger="cf-lite"):
        log_exception(logger, "Nothing loaded", level=LogLevel.CRITICAL)

    assert caplog.records[-1].levelno == logging.CRITICAL
    assert caplog.records[-1].getMessage() == "Nothing loaded"
