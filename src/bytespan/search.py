"""Byte, predicate and substring search.

Every search returns the *suffix* of the subject starting at the match,
not just the matched bytes, so the result can be fed straight into the
next search or split.  Outcomes:

* match -- suffix view from the match to the end of the subject;
* no match, or an empty subject -- :data:`EMPTY`;
* invalid subject -- :data:`INVALID`.
"""

from __future__ import annotations

from bytespan.models import EMPTY, INVALID, Predicate, ReadView
from bytespan.view import check_predicate, to_byte


def index_of(view: ReadView, byte: int) -> int:
    """Index of the first *byte* in a valid *view*, or -1."""
    buf, start, stop = view.buf, view.offset, view.offset + view.length
    if isinstance(buf, (bytes, bytearray)):
        found = buf.find(byte, start, stop)
        return -1 if found < 0 else found - start
    for i in range(view.length):
        if buf[start + i] == byte:
            return i
    return -1


def rindex_of(view: ReadView, byte: int) -> int:
    """Index of the last *byte* in a valid *view*, or -1."""
    buf, start, stop = view.buf, view.offset, view.offset + view.length
    if isinstance(buf, (bytes, bytearray)):
        found = buf.rfind(byte, start, stop)
        return -1 if found < 0 else found - start
    for i in range(view.length - 1, -1, -1):
        if buf[start + i] == byte:
            return i
    return -1


def find_char(view: ReadView, ch: int | bytes | str) -> ReadView:
    """Return the suffix of *view* starting at the first occurrence of *ch*.

    Examples
    --------
    >>> from bytespan.view import from_cstr
    >>> bytes(find_char(from_cstr("path/to/file"), "/"))
    b'/to/file'
    """
    byte = to_byte(ch)
    if not view.is_valid:
        return INVALID
    if view.length == 0:
        return EMPTY
    i = index_of(view, byte)
    return EMPTY if i < 0 else view.drop(i)


def rfind_char(view: ReadView, ch: int | bytes | str) -> ReadView:
    """Return the suffix of *view* starting at the last occurrence of *ch*."""
    byte = to_byte(ch)
    if not view.is_valid:
        return INVALID
    if view.length == 0:
        return EMPTY
    i = rindex_of(view, byte)
    return EMPTY if i < 0 else view.drop(i)


def find_pred(view: ReadView, pred: Predicate | None) -> ReadView:
    """Return the suffix starting at the first byte satisfying *pred*.

    A ``None`` predicate never matches.
    """
    check_predicate(pred)
    if not view.is_valid:
        return INVALID
    if view.length == 0 or pred is None:
        return EMPTY
    for i, byte in enumerate(view.window()):
        if pred(byte):
            return view.drop(i)
    return EMPTY


def rfind_pred(view: ReadView, pred: Predicate | None) -> ReadView:
    """Return the suffix starting at the last byte satisfying *pred*."""
    check_predicate(pred)
    if not view.is_valid:
        return INVALID
    if view.length == 0 or pred is None:
        return EMPTY
    window = view.window()
    for i in range(view.length - 1, -1, -1):
        if pred(window[i]):
            return view.drop(i)
    return EMPTY


def find_first_not_pred(view: ReadView, pred: Predicate | None) -> ReadView:
    """Return the suffix starting at the first byte *not* satisfying *pred*.

    A ``None`` predicate matches nothing, so the first byte already
    qualifies and *view* is returned unchanged.  When every byte matches
    the result is :data:`EMPTY`.
    """
    check_predicate(pred)
    if not view.is_valid:
        return INVALID
    if view.length == 0:
        return EMPTY
    if pred is None:
        return view
    for i, byte in enumerate(view.window()):
        if not pred(byte):
            return view.drop(i)
    return EMPTY


def find_str(haystack: ReadView, needle: ReadView) -> ReadView:
    """Return the suffix of *haystack* starting at the first *needle*.

    An empty *needle* matches at position 0, so *haystack* is returned
    unchanged.  If either operand is invalid the result is
    :data:`INVALID`.

    Examples
    --------
    >>> from bytespan.view import from_cstr
    >>> bytes(find_str(from_cstr("hello world world"), from_cstr("world")))
    b'world world'
    """
    if not haystack.is_valid or not needle.is_valid:
        return INVALID
    if needle.length == 0:
        return haystack
    if needle.length > haystack.length:
        return EMPTY

    window, pattern, n = haystack.window(), needle.window(), needle.length
    first = pattern[0]
    for i in range(haystack.length - n + 1):
        if window[i] == first and window[i:i + n] == pattern:
            return haystack.drop(i)
    return EMPTY
