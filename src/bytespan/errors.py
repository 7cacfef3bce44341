"""Error hierarchy for bytespan.

Semantic outcomes of view operations (a failed search, a malformed view)
are reported with the sentinel views ``INVALID``, ``NOT_FOUND`` and
``EMPTY`` and never raise.  The exceptions defined here are reserved for
programming errors at the call boundary: a buffer that is not bytes-like,
an offset that falls outside its buffer, a "byte" that is three bytes
long.

Every exception inherits from :class:`BytespanError` and carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict and an optional
``cause``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the library can raise."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class BytespanError(Exception):
    """Base exception for all bytespan errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------

class ViewArgumentError(BytespanError):
    """An argument has the wrong type or shape.

    Raised for non-bytes-like buffers, read-only buffers passed where a
    writable one is required, bytes that are not exactly one byte long,
    and predicates that are neither ``None`` nor callable.

    Context keys: ``argument``, ``type``, ``value``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message=message,
            context=context,
            cause=cause,
        )


class ViewBoundsError(BytespanError):
    """An offset, length or capacity does not fit inside its buffer.

    Context keys: ``offset``, ``length``, ``buffer_length``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.OUT_OF_BOUNDS,
            message=message,
            context=context,
            cause=cause,
        )
