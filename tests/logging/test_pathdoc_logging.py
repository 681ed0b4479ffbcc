"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from pathdoc.errors import NonMappingParentError
from pathdoc.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)
from pathdoc.model.document import PathDocument


@pytest.fixture(autouse=True)
def _restore_level():
    yield
    disable_debug_logging()


def test_logger_naming_and_inheritance():
    """Test that child loggers inherit the root level."""
    logger = get_logger("pathdoc.test")
    assert logger.name == "pathdoc.test"
    assert logger.level == logging.NOTSET

    set_global_log_level(logging.WARNING)
    assert logging.getLogger("pathdoc").level == logging.WARNING
    assert logger.getEffectiveLevel() == logging.WARNING


def test_enable_and_disable_debug_logging():
    logger = get_logger("pathdoc.test.debug")

    enable_debug_logging()
    assert logger.isEnabledFor(logging.DEBUG)

    disable_debug_logging()
    assert not logger.isEnabledFor(logging.DEBUG)
    assert logger.isEnabledFor(logging.INFO)


def test_reset_and_custom_handler():
    """Test that reset allows reconfiguration with a custom handler."""
    stream = StringIO()
    reset_logging()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(levelname)s:%(message)s",
        handler=logging.StreamHandler(stream),
    )
    try:
        get_logger("pathdoc.test.custom").info("hello")
        assert "INFO:hello" in stream.getvalue()
        assert len(logging.getLogger("pathdoc").handlers) == 1
    finally:
        reset_logging()
        setup_root_logger()


def test_document_logs_auto_created_parents(caplog):
    caplog.set_level(logging.DEBUG, logger="pathdoc")
    doc = PathDocument("idx", "type", "id", {})

    doc.set_value("a.b", 1)

    messages = [r.getMessage() for r in caplog.records]
    assert "Creating parent [a] for path [a.b]" in messages


def test_document_logs_rejected_write(caplog):
    caplog.set_level(logging.DEBUG, logger="pathdoc")
    doc = PathDocument("idx", "type", "id", {"a": 1})

    with pytest.raises(NonMappingParentError):
        doc.set_value("a.b", 1)

    assert any(
        r.levelno == logging.DEBUG and "Rejected write to [a.b]" in r.getMessage()
        for r in caplog.records
    )


def test_reads_do_not_log(caplog):
    caplog.set_level(logging.DEBUG, logger="pathdoc")
    doc = PathDocument("idx", "type", "id", {"a": {"b": 1}})

    doc.get_value("a.b")
    doc.has_value("a.c")
    doc.get_value("x.y")

    assert not [r for r in caplog.records if r.name.startswith("pathdoc")]
