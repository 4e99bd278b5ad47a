"""
Tests for the colored log formatter.
"""

import logging

import pytest

from fieldcase_generator.colored_logging import (
    ColoredFormatter,
    log_progress,
    log_section,
    log_success,
    setup_colored_logging,
)


def make_record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("test", level, __file__, 1, message, None, None)


def colored_formatter() -> ColoredFormatter:
    formatter = ColoredFormatter()
    formatter.use_colors = True
    return formatter


def test_plain_when_colors_disabled():
    formatter = ColoredFormatter(use_colors=False)

    assert formatter.format(make_record(logging.ERROR, "boom")) == "ERROR: boom"


def test_error_is_red():
    formatted = colored_formatter().format(make_record(logging.ERROR, "boom"))

    assert formatted.startswith(ColoredFormatter.COLORS["ERROR"])
    assert formatted.endswith(ColoredFormatter.RESET)


def test_success_message_is_bold_green():
    formatted = colored_formatter().format(make_record(logging.INFO, "✓ Accessors module written"))

    assert formatted.startswith(ColoredFormatter.SPECIAL_COLORS["success"] + ColoredFormatter.BOLD)


def test_progress_message():
    formatted = colored_formatter().format(make_record(logging.INFO, "→ Loading definition file..."))

    assert formatted.startswith(ColoredFormatter.SPECIAL_COLORS["progress"])


def test_regular_info_is_uncolored():
    assert colored_formatter().format(make_record(logging.INFO, "hello")) == "INFO: hello"


@pytest.mark.usefixtures("restore_root_logging")
def test_helpers_prefix_messages(caplog):
    setup_colored_logging(level=logging.DEBUG, use_colors=False)
    logger = logging.getLogger("fieldcase_generator.tests")
    logger.addHandler(caplog.handler)
    try:
        log_success(logger, "done")
        log_progress(logger, "rendering")
        log_section(logger, "Accessor Generation")
    finally:
        logger.removeHandler(caplog.handler)

    messages = [record.getMessage() for record in caplog.records]
    assert messages[:2] == ["✓ done", "→ rendering"]
    assert "  ACCESSOR GENERATION" in messages
