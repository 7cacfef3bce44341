"""Constructors and accessors for read views and mutable segments.

These are the only entry points that look at raw Python objects; every
other operation in the library takes and returns :class:`ReadView` /
:class:`MutableSegment` values.
"""

from __future__ import annotations

from typing import Any

from bytespan.config import get_config
from bytespan.errors import ViewArgumentError
from bytespan.models import (
    EMPTY,
    INVALID,
    SIZE_MAX,
    Buffer,
    MutableSegment,
    Predicate,
    ReadView,
    ViewState,
)
from bytespan.observability import get_logger

log = get_logger("bytespan.view")


# ---------------------------------------------------------------------------
# Argument coercion
# ---------------------------------------------------------------------------

def _as_buffer(buf: Any, argument: str) -> Buffer:
    if isinstance(buf, (bytes, bytearray)):
        return buf
    try:
        view = buf if isinstance(buf, memoryview) else memoryview(buf)
        return view if view.format == "B" and view.ndim == 1 else view.cast("B")
    except TypeError as exc:
        raise ViewArgumentError(
            f"{argument} must be a bytes-like object, got {type(buf).__name__}",
            context={"argument": argument, "type": type(buf).__name__},
            cause=exc,
        ) from exc


def to_byte(ch: int | bytes | str) -> int:
    """Normalize a single byte given as ``int``, ``bytes`` or ``str``.

    ``str`` values are encoded with the configured ``text_encoding`` and
    must encode to exactly one byte.

    Raises
    ------
    ViewArgumentError
        If *ch* does not denote exactly one byte.
    """
    if isinstance(ch, int) and not isinstance(ch, bool):
        if 0 <= ch <= 0xFF:
            return ch
    elif isinstance(ch, str):
        encoded = ch.encode(get_config().text_encoding)
        if len(encoded) == 1:
            return encoded[0]
    elif isinstance(ch, (bytes, bytearray)) and len(ch) == 1:
        return ch[0]
    raise ViewArgumentError(
        f"expected a single byte, got {ch!r}",
        context={"argument": "ch", "type": type(ch).__name__, "value": ch},
    )


def check_predicate(pred: Predicate | None) -> Predicate | None:
    """Return *pred* unchanged, rejecting non-callable values.

    ``None`` is allowed: every consuming operation documents what a null
    predicate means for it.
    """
    if pred is not None and not callable(pred):
        raise ViewArgumentError(
            f"predicate must be callable or None, got {type(pred).__name__}",
            context={"argument": "pred", "type": type(pred).__name__},
        )
    return pred


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------

def from_cstr(data: bytes | bytearray | memoryview | str | None) -> ReadView:
    """Build a view over NUL-terminated data.

    The view stops at the first ``b"\\0"`` (or at the end of *data* when
    there is none).  ``None`` yields :data:`EMPTY`.  When the active
    configuration sets ``cstr_max_scan`` the terminator search is bounded
    by it.

    Examples
    --------
    >>> bytes(from_cstr(b"hello\\0world"))
    b'hello'
    """
    if data is None:
        return EMPTY
    if isinstance(data, str):
        data = data.encode(get_config().text_encoding)
    buf = _as_buffer(data, "data")

    limit = len(buf)
    max_scan = get_config().cstr_max_scan
    if max_scan is not None:
        limit = min(limit, max_scan)

    if isinstance(buf, (bytes, bytearray)):
        end = buf.find(0, 0, limit)
        length = limit if end < 0 else end
    else:
        length = 0
        while length < limit and buf[length] != 0:
            length += 1
    return ReadView(buf, 0, length)


def from_buffer(buf: Any, length: int | None = None, *, offset: int = 0) -> ReadView:
    """Build a view over ``buf[offset:offset + length]``.

    Parameters
    ----------
    buf:
        Any bytes-like object, or ``None``.
    length:
        Number of bytes to view.  Defaults to the rest of *buf*.
    offset:
        Index of the first viewed byte.

    Returns
    -------
    ReadView
        :data:`INVALID` when *buf* is ``None`` with a non-zero *length*,
        :data:`EMPTY` when *buf* is ``None`` otherwise.

    Raises
    ------
    ViewArgumentError
        If *buf* is not bytes-like.
    ViewBoundsError
        If the requested window does not fit inside *buf*.
    """
    if buf is None:
        if length:
            log.debug(
                "null buffer with non-zero length",
                extra={"extra_fields": {"op": "from_buffer", "length": length}},
            )
            return INVALID
        return EMPTY

    data = _as_buffer(buf, "buf")
    if length is None:
        length = len(data) - offset
    return ReadView(data, offset, length)


def mut_from_buffer(
    buf: Any,
    capacity: int | None = None,
    *,
    offset: int = 0,
) -> MutableSegment:
    """Build a writable segment over ``buf[offset:offset + capacity]``.

    A ``None`` buffer is accepted and yields an unusable segment that
    keeps the claimed *capacity*; every write into it is a no-op.

    Raises
    ------
    ViewArgumentError
        If *buf* is not a writable bytes-like object.
    ViewBoundsError
        If the requested window does not fit inside *buf*.
    """
    if buf is None:
        return MutableSegment(None, 0, capacity or 0)

    if isinstance(buf, bytearray):
        data = buf
    else:
        data = _as_buffer(buf, "buf")
        if not isinstance(data, memoryview) or data.readonly:
            raise ViewArgumentError(
                f"buf must be a writable buffer, got {type(buf).__name__}",
                context={"argument": "buf", "type": type(buf).__name__},
            )
    if capacity is None:
        capacity = len(data) - offset
    return MutableSegment(data, offset, capacity)


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

def is_valid(view: ReadView) -> bool:
    """Return ``True`` unless *view* is :data:`INVALID`."""
    return view.is_valid


def is_not_found(view: ReadView) -> bool:
    """Return ``True`` only for the :data:`NOT_FOUND` sentinel state."""
    return view.state is ViewState.NOT_FOUND


def length(view: ReadView) -> int:
    """Return the viewed length, or :data:`SIZE_MAX` for :data:`INVALID`."""
    if not view.is_valid:
        return SIZE_MAX
    return view.length


def is_empty(view: ReadView) -> bool:
    """Return ``True`` for valid zero-length views; never for :data:`INVALID`."""
    return view.is_valid and view.length == 0


def buffer(view: ReadView) -> memoryview | None:
    """Return a read-only ``memoryview`` of the viewed bytes.

    Empty views and :data:`INVALID` both return ``None``; use
    :func:`is_valid` and :func:`length` to tell them apart.
    """
    if not view.is_valid or view.length == 0:
        return None
    return view.window().toreadonly()


def mut_buffer(segment: MutableSegment) -> memoryview | None:
    """Return a writable ``memoryview`` of the segment, or ``None`` if unusable."""
    if segment.buf is None:
        return None
    return memoryview(segment.buf)[segment.offset:segment.offset + segment.length]


def mut_length(segment: MutableSegment) -> int:
    """Return the remaining capacity of *segment*."""
    return segment.length
