"""Shared test fixtures for the bytespan test suite."""

from __future__ import annotations

import pytest

from bytespan.config import reset_config
from bytespan.models import MutableSegment
from bytespan.view import mut_from_buffer


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def out_buffer() -> bytearray:
    """A zeroed 100-byte output buffer."""
    return bytearray(100)


@pytest.fixture
def out_segment(out_buffer: bytearray) -> MutableSegment:
    """A writable segment spanning the whole of ``out_buffer``."""
    return mut_from_buffer(out_buffer)
