"""Tests for the ``PathRichHandler`` filesystem event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from slashpath.platform.logging import LOGGER_NAME, PathRichHandler, setup_logger


def _make_handler() -> PathRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return PathRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with filesystem extras for testing."""

    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_message_truncates_long_absolute_paths() -> None:
    handler = _make_handler()
    record = _build_record(
        fs_event="fs.write",
        path="/home/user/projects/site/build/static/index.html",
        chars=120,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Wrote /…/site/build/static/index.html" in plain
    assert "120 chars" in plain
    assert "/home/user" not in plain


def test_render_message_keeps_short_relative_paths() -> None:
    handler = _make_handler()
    record = _build_record(fs_event="fs.exists", path="a/b", exists=False)

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Exists? a/b (no)" in plain


def test_render_message_includes_error_details() -> None:
    handler = _make_handler()
    record = _build_record(
        fs_event="fs.error",
        path="/root",
        error_message="Permission denied",
    )

    plain = handler.render_message(record, "").plain  # pyright: ignore[reportAttributeAccessIssue]

    assert "Failed /root (Permission denied)" in plain


def test_render_message_falls_back_for_plain_records() -> None:
    handler = _make_handler()
    record = _build_record()

    rendered = handler.render_message(record, "plain message")

    assert isinstance(rendered, Text)
    assert rendered.plain == "plain message"


def _restore_silent_logger() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "slashpath.log"
    try:
        logger = setup_logger(log_file=log_file)
        handler_types = {type(handler).__name__ for handler in logger.handlers}

        assert handler_types == {"PathRichHandler", "RotatingFileHandler"}
        assert log_file.parent.is_dir()
    finally:
        _restore_silent_logger()
