"""Tests for observability/logger.py"""
import io
import json
import logging

import pytest

from bytespan.observability.logger import StructuredFormatter


@pytest.fixture()
def captured():
    """Attach a JSON handler to a private logger and return (logger, stream)."""
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("test.bytespan.formatter")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    logger.addHandler(handler)
    yield logger, stream
    logger.removeHandler(handler)


def _entries(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestStructuredFormatter:
    def test_guaranteed_keys_only_without_extra(self, captured):
        logger, stream = captured
        logger.warning("view rejected")
        (entry,) = _entries(stream)
        assert set(entry) == {"ts", "level", "logger", "message"}
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "test.bytespan.formatter"

    def test_cursor_fields_are_top_level(self, captured):
        logger, stream = captured
        logger.debug(
            "append truncated",
            extra={"extra_fields": {"op": "append", "requested": 12, "written": 3}},
        )
        (entry,) = _entries(stream)
        assert (entry["op"], entry["requested"], entry["written"]) == ("append", 12, 3)
        assert entry["message"] == "append truncated"

    def test_message_arguments_are_interpolated(self, captured):
        logger, stream = captured
        logger.info("wrote %d of %d bytes", 3, 12)
        assert _entries(stream)[0]["message"] == "wrote 3 of 12 bytes"

    def test_non_json_values_fall_back_to_str(self, captured):
        logger, stream = captured
        window = memoryview(b"abc")
        logger.debug("window", extra={"extra_fields": {"window": window, "buf": bytearray(b"x")}})
        entry = _entries(stream)[0]
        assert entry["window"] == str(window)
        assert entry["buf"] == "bytearray(b'x')"

    def test_library_error_traceback_included(self, captured):
        from bytespan.errors import ViewBoundsError
        from bytespan.view import from_buffer

        logger, stream = captured
        try:
            from_buffer(b"abc", 10)
        except ViewBoundsError:
            logger.exception("bad window")
        entry = _entries(stream)[0]
        assert entry["level"] == "ERROR"
        assert "ViewBoundsError" in entry["exception"]

    def test_one_line_per_record(self, captured):
        logger, stream = captured
        logger.warning("first\nsecond")
        assert len(stream.getvalue().splitlines()) == 1


class TestGetLogger:
    def test_returns_logger_with_handler(self):
        from bytespan.observability.logger import get_logger

        logger = get_logger("test.bytespan.unique1")
        assert isinstance(logger, logging.Logger)
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_string_level(self):
        from bytespan.observability.logger import get_logger

        logger = get_logger("test.bytespan.unique2", level="info")
        assert logger.level == logging.INFO

    def test_idempotent_no_duplicate_handlers(self):
        from bytespan.observability.logger import get_logger

        name = "test.bytespan.unique3"
        get_logger(name)
        assert len(get_logger(name).handlers) == 1

    def test_custom_stream(self):
        from bytespan.observability.logger import get_logger

        stream = io.StringIO()
        logger = get_logger("test.bytespan.stream_unique", stream=stream)
        logger.warning("careful", extra={"extra_fields": {"key": "val"}})
        entry = json.loads(stream.getvalue())
        assert entry["key"] == "val"
        assert entry["message"] == "careful"

    def test_set_level(self):
        from bytespan.observability.logger import get_logger, set_level

        logger = get_logger("test.bytespan.unique4")
        set_level(logging.ERROR)
        assert logger.level == logging.ERROR

    def test_unknown_level_name(self):
        from bytespan.observability.logger import set_level

        with pytest.raises(ValueError):
            set_level("LOUD")

    def test_resolve_level(self):
        from bytespan.observability.logger import resolve_level

        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(logging.ERROR) == logging.ERROR
        with pytest.raises(ValueError):
            resolve_level("LOUD")


class TestLibraryLogging:
    def test_invalid_construction_logged_at_debug(self):
        from bytespan.config import configure
        from bytespan.observability.logger import StructuredFormatter
        from bytespan.view import from_buffer

        configure(log_level="DEBUG")
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
        logger = logging.getLogger("bytespan.view")
        logger.addHandler(handler)
        try:
            from_buffer(None, 5)
        finally:
            logger.removeHandler(handler)
        entry = json.loads(stream.getvalue().splitlines()[-1])
        assert entry["op"] == "from_buffer"
        assert entry["length"] == 5

    def test_quiet_by_default(self):
        from bytespan.observability.logger import StructuredFormatter
        from bytespan.view import from_buffer

        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
        logger = logging.getLogger("bytespan.view")
        logger.addHandler(handler)
        try:
            from_buffer(None, 5)
        finally:
            logger.removeHandler(handler)
        assert stream.getvalue() == ""
