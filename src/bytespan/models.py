"""View types and sentinel values.

A :class:`ReadView` is a borrowed ``(buf, offset, length)`` window into a
bytes-like object the caller owns.  A :class:`MutableSegment` is the
writable counterpart describing the remaining capacity of a caller-owned
``bytearray`` (or writable ``memoryview``).  Neither type ever copies or
owns the bytes it describes; mutating the underlying buffer while a view
over it is in use is the caller's responsibility.

Read views are always in one of the :class:`ViewState` states.  The three
sentinels are exposed as module constants:

* :data:`EMPTY` -- a successful zero-length result.
* :data:`NOT_FOUND` -- a well-formed split that found no split point.
* :data:`INVALID` -- malformed input; contagious through composition.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Callable, Union

from bytespan.errors import ViewArgumentError, ViewBoundsError

SIZE_MAX: int = 2**64 - 1
"""Out-of-band length reported for :data:`INVALID`."""

END: int = 2**31 - 1
"""Index meaning "end of the view" for :func:`~bytespan.slicing.slice_view`."""

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]
Predicate = Callable[[int], bool]


def check_window(buf: Buffer, offset: int, length: int) -> None:
    """Raise unless ``buf[offset:offset + length]`` lies inside *buf*.

    *buf* must be ``bytes``, ``bytearray`` or a one-dimensional
    byte-format ``memoryview``; the constructors in :mod:`bytespan.view`
    normalize other buffer objects before getting here.

    Raises
    ------
    ViewArgumentError
        If *buf* is not a byte buffer.
    ViewBoundsError
        If the window does not fit inside *buf*.
    """
    if isinstance(buf, memoryview):
        if buf.format != "B" or buf.ndim != 1:
            raise ViewArgumentError(
                f"memoryview must be one-dimensional with format 'B', got {buf.format!r}",
                context={"argument": "buf", "type": "memoryview", "value": buf.format},
            )
    elif not isinstance(buf, (bytes, bytearray)):
        raise ViewArgumentError(
            f"buf must be bytes, bytearray or memoryview, got {type(buf).__name__}",
            context={"argument": "buf", "type": type(buf).__name__},
        )
    available = len(buf)
    if offset < 0 or length < 0 or offset + length > available:
        raise ViewBoundsError(
            f"window [{offset}, {offset + length}) does not fit in a buffer of {available} bytes",
            context={"offset": offset, "length": length, "buffer_length": available},
        )


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class ViewState(str, Enum):
    """The distinguished states of a :class:`ReadView`."""

    VALID = "valid"
    """Valid and non-empty."""

    EMPTY = "empty"
    """Valid, zero-length, backed by a real buffer."""

    NOT_FOUND = "not_found"
    """Valid, zero-length, no buffer: a split found nothing."""

    INVALID = "invalid"
    """No buffer and a non-zero length: malformed input."""


# ---------------------------------------------------------------------------
# Read view
# ---------------------------------------------------------------------------

@total_ordering
@dataclass(frozen=True, eq=False)
class ReadView:
    """A read-only, non-owning view of ``buf[offset:offset + length]``.

    Instances are normally produced by the constructors in
    :mod:`bytespan.view` and by every view operation.  ``==`` and the
    ordering operators follow :func:`~bytespan.compare.equals` and
    :func:`~bytespan.compare.compare`.

    Attributes
    ----------
    buf:
        The borrowed bytes-like object, or ``None`` for the
        :data:`NOT_FOUND` and :data:`INVALID` sentinels.
    offset:
        Index of the first viewed byte within *buf*.
    length:
        Number of viewed bytes (:data:`SIZE_MAX` for :data:`INVALID`).
    """

    buf: Buffer | None
    offset: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        """Reject encodings other than the sentinels and in-bounds windows."""
        if self.buf is None:
            if self.offset != 0 or self.length not in (0, SIZE_MAX):
                raise ViewArgumentError(
                    "a view without a buffer must be NOT_FOUND (length 0) "
                    f"or INVALID (length SIZE_MAX), got offset={self.offset} length={self.length}",
                    context={"argument": "buf", "value": None, "length": self.length},
                )
            return
        check_window(self.buf, self.offset, self.length)

    @property
    def is_valid(self) -> bool:
        return self.buf is not None or self.length == 0

    @property
    def state(self) -> ViewState:
        if not self.is_valid:
            return ViewState.INVALID
        if self.length:
            return ViewState.VALID
        if self.buf is None:
            return ViewState.NOT_FOUND
        return ViewState.EMPTY

    def window(self) -> memoryview:
        """Return a zero-copy ``memoryview`` over the viewed bytes.

        Sentinels and empty views yield an empty ``memoryview``.
        """
        if self.buf is None or not self.length:
            return memoryview(b"")
        return memoryview(self.buf)[self.offset:self.offset + self.length]

    def take(self, n: int) -> ReadView:
        """The first *n* bytes of a valid view, ``0 <= n <= length``."""
        return ReadView(self.buf, self.offset, n)

    def drop(self, n: int) -> ReadView:
        """Everything after the first *n* bytes of a valid view."""
        return ReadView(self.buf, self.offset + n, self.length - n)

    def __bytes__(self) -> bytes:
        return self.window().tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadView):
            return NotImplemented
        from bytespan.compare import equals

        return equals(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ReadView):
            return NotImplemented
        from bytespan.compare import compare

        return compare(self, other) < 0

    def __hash__(self) -> int:
        if not self.is_valid:
            return hash((ViewState.INVALID, SIZE_MAX))
        return hash(bytes(self))

    def __repr__(self) -> str:
        state = self.state
        if state is ViewState.VALID:
            return f"ReadView({bytes(self)!r})"
        return f"ReadView(<{state.value}>)"


# ---------------------------------------------------------------------------
# Mutable segment
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class MutableSegment:
    """The writable window ``buf[offset:offset + length]``.

    Each write operation in :mod:`bytespan.cursor` returns a new segment
    describing the capacity left after the write, so output can be built
    by chaining calls without re-checking bounds.

    Two segments are equal when they describe the same window of the same
    buffer object; the buffer's contents play no part.

    Attributes
    ----------
    buf:
        The borrowed writable buffer, or ``None`` for an unusable segment.
    offset:
        Index of the first writable byte within *buf*.
    length:
        Remaining capacity in bytes.
    """

    buf: WritableBuffer | None
    offset: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        if self.buf is None:
            if self.offset != 0 or self.length < 0:
                raise ViewBoundsError(
                    f"unusable segment needs offset 0 and a non-negative capacity, "
                    f"got offset={self.offset} length={self.length}",
                    context={"offset": self.offset, "length": self.length},
                )
            return
        check_window(self.buf, self.offset, self.length)

    @property
    def usable(self) -> bool:
        return self.buf is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MutableSegment):
            return NotImplemented
        return (
            self.buf is other.buf
            and self.offset == other.offset
            and self.length == other.length
        )

    def __hash__(self) -> int:
        return hash((id(self.buf), self.offset, self.length))

    def __repr__(self) -> str:
        if self.buf is None:
            return f"MutableSegment(<unusable>, length={self.length})"
        return f"MutableSegment(offset={self.offset}, length={self.length})"


# ---------------------------------------------------------------------------
# Sentinels
# ---------------------------------------------------------------------------

EMPTY = ReadView(b"", 0, 0)
NOT_FOUND = ReadView(None, 0, 0)
INVALID = ReadView(None, 0, SIZE_MAX)
MUT_EMPTY = MutableSegment(None, 0, 0)
