"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from flightpath.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    parse_log_level,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("flightpath.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_global_level_propagates_to_children_and_new_loggers():
    """Changing global level updates existing and new child loggers."""
    logger1 = get_logger("flightpath.algorithms")
    logger2 = get_logger("flightpath.dsl")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("flightpath.cli")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    """Repeated setup should not accumulate handlers."""
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("flightpath")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1

    set_global_log_level(logging.ERROR)
    assert root_logger.level == logging.ERROR


def test_custom_format_string_applied():
    """Custom format string is respected by the root handler."""
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    logger = get_logger("flightpath.test.format")
    logger.info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:flightpath.test.format" in out
    assert "MSG:hello" in out


def test_loader_logs_through_package_handler(routes_yaml):
    """Modules log through the shared package handler."""
    from flightpath.dsl.loader import load_routes_yaml

    capture = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(name)s|%(message)s",
        handler=logging.StreamHandler(capture),
    )

    load_routes_yaml(routes_yaml)
    assert "flightpath.dsl.loader|Loaded route graph: 4 nodes, 4 edges" in capture.getvalue()


def test_environment_sets_initial_level(monkeypatch):
    """FLIGHTPATH_LOG_LEVEL is used when setup gets no explicit level."""
    monkeypatch.setenv("FLIGHTPATH_LOG_LEVEL", "debug")
    logger = get_logger("flightpath.test.env")
    assert logger.getEffectiveLevel() == logging.DEBUG

    reset_logging()
    setup_root_logger(level=logging.WARNING)
    assert logger.getEffectiveLevel() == logging.WARNING


def test_environment_unset_defaults_to_info(monkeypatch):
    monkeypatch.delenv("FLIGHTPATH_LOG_LEVEL", raising=False)
    assert get_logger("flightpath.test.env").getEffectiveLevel() == logging.INFO


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("WARN", logging.WARNING),
        ("40", logging.ERROR),
        (logging.CRITICAL, logging.CRITICAL),
    ],
)
def test_parse_log_level(value, expected):
    assert parse_log_level(value) == expected


def test_parse_log_level_rejects_unknown_name():
    with pytest.raises(ValueError, match="Invalid log level 'chatty'"):
        parse_log_level("chatty")
