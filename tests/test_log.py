"""Tests for console logging setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from weather_collector.log import ColoredFormatter, config_logger

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Restore root handlers and level after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(level: int) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, "hello", None, None)


class TestColoredFormatter:
    def test_error_is_red(self) -> None:
        text = ColoredFormatter("%(message)s").format(make_record(logging.ERROR))
        assert text == "\033[31mhello\033[0m"

    def test_info_is_plain(self) -> None:
        text = ColoredFormatter("%(message)s").format(make_record(logging.INFO))
        assert text == "hello\033[0m"


class TestConfigLogger:
    def test_info_by_default(self, root_logger: logging.Logger) -> None:
        config_logger()
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, ColoredFormatter)

    def test_debug(self, root_logger: logging.Logger) -> None:
        config_logger(debug=True)
        assert root_logger.level == logging.DEBUG

    def test_repeated_calls_do_not_duplicate(self, root_logger: logging.Logger) -> None:
        config_logger()
        config_logger()
        assert len(root_logger.handlers) == 1
