"""Observability: structured logging for bytespan."""

from __future__ import annotations

from .logger import StructuredFormatter, get_logger, set_level

__all__ = [
    "StructuredFormatter",
    "get_logger",
    "set_level",
]
