"""Bounded writes into caller-owned buffers.

:func:`append` implements the cursor pattern: each call writes as much of
the source as fits and returns the segment describing the space that is
left, so output is built by threading the returned segment through a
sequence of calls::

    out = bytearray(100)
    start = mut_from_buffer(out)
    cursor = append(start, from_cstr("hello"))
    cursor = append(cursor, from_cstr(" world"))
    cursor = append(cursor, from_cstr("!"))
    bytes(written(start, cursor))   # b"hello world!"
    cursor.length                   # 88

Writes never touch bytes outside ``buf[offset:offset + length]`` of the
segment they are given and never resize the underlying ``bytearray``.
Running out of capacity truncates silently; truncation is logged at
``DEBUG`` on the ``bytespan.cursor`` logger.
"""

from __future__ import annotations

from bytespan.models import INVALID, MutableSegment, ReadView
from bytespan.observability import get_logger

log = get_logger("bytespan.cursor")


def _write(segment: MutableSegment, src: ReadView, op: str) -> int:
    count = min(src.length, segment.length)
    if count:
        segment.buf[segment.offset:segment.offset + count] = src.window()[:count]
    if count < src.length:
        log.debug(
            "%s truncated", op,
            extra={"extra_fields": {"op": op, "requested": src.length, "written": count}},
        )
    return count


def copy(dst: MutableSegment, src: ReadView) -> ReadView:
    """Copy *src* to the start of *dst* and return a view of what was written.

    At most ``dst.length`` bytes are copied.  The result is
    :data:`INVALID` when *dst* is unusable or *src* is invalid.

    Examples
    --------
    >>> from bytespan.view import from_cstr, mut_from_buffer
    >>> bytes(copy(mut_from_buffer(bytearray(3)), from_cstr("too_long")))
    b'too'
    """
    if dst.buf is None or not src.is_valid:
        log.debug(
            "copy rejected",
            extra={"extra_fields": {"op": "copy", "dst_usable": dst.buf is not None}},
        )
        return INVALID
    count = _write(dst, src, "copy")
    return ReadView(dst.buf, dst.offset, count)


def append(segment: MutableSegment, src: ReadView) -> MutableSegment:
    """Write *src* at the start of *segment* and return the remaining space.

    *segment* is returned unchanged when it is unusable or *src* is
    invalid or empty.
    """
    if segment.buf is None or not src.is_valid or src.length == 0:
        return segment
    count = _write(segment, src, "append")
    return MutableSegment(segment.buf, segment.offset + count, segment.length - count)


def written(origin: MutableSegment, cursor: MutableSegment) -> ReadView:
    """Return a view of the bytes written between *origin* and *cursor*.

    *cursor* must be a segment obtained by appending into *origin* (same
    buffer, starting at or after ``origin.offset`` and ending at the same
    place).  Anything else yields :data:`INVALID`.
    """
    if (
        origin.buf is None
        or cursor.buf is not origin.buf
        or cursor.offset < origin.offset
        or cursor.offset + cursor.length != origin.offset + origin.length
    ):
        return INVALID
    return ReadView(origin.buf, origin.offset, cursor.offset - origin.offset)
