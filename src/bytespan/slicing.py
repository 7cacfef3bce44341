"""Index-clamped slicing and predicate trimming."""

from __future__ import annotations

from bytespan.models import EMPTY, END, INVALID, Predicate, ReadView
from bytespan.view import check_predicate


def _clamp(index: int, length: int) -> int:
    if index < 0:
        index += length
    return min(max(index, 0), length)


def slice_view(view: ReadView, start: int, end: int = END) -> ReadView:
    """Return the sub-view ``[start, end)`` of *view* with clamped indices.

    Negative indices count from the end (``len + idx``).  Both indices are
    then clamped into ``[0, len]``, so any integer is accepted; :data:`END`
    (or any index past the end) means "to the end of the view".  If the
    clamped *start* is not before the clamped *end* the result is
    :data:`EMPTY`.

    Examples
    --------
    >>> from bytespan.view import from_cstr
    >>> bytes(slice_view(from_cstr("abcdefgh"), -2))
    b'gh'
    >>> bytes(slice_view(from_cstr("abcdefgh"), -100, 3))
    b'abc'
    """
    if not view.is_valid:
        return INVALID
    if view.length == 0:
        return EMPTY
    lo = _clamp(start, view.length)
    hi = _clamp(end, view.length)
    if lo >= hi:
        return EMPTY
    return ReadView(view.buf, view.offset + lo, hi - lo)


def _leading(view: ReadView, pred: Predicate) -> int:
    count = 0
    for byte in view.window():
        if not pred(byte):
            break
        count += 1
    return count


def _trailing(view: ReadView, pred: Predicate, floor: int = 0) -> int:
    window = view.window()
    end = view.length
    while end > floor and pred(window[end - 1]):
        end -= 1
    return view.length - end


def ltrim(view: ReadView, pred: Predicate | None) -> ReadView:
    """Drop the longest prefix of bytes satisfying *pred*.

    A ``None`` predicate leaves *view* unchanged.  If every byte matches
    the result is :data:`EMPTY`.
    """
    check_predicate(pred)
    if not view.is_valid:
        return INVALID
    if view.length == 0 or pred is None:
        return view
    start = _leading(view, pred)
    if start == view.length:
        return EMPTY
    return view.drop(start)


def rtrim(view: ReadView, pred: Predicate | None) -> ReadView:
    """Drop the longest suffix of bytes satisfying *pred*."""
    check_predicate(pred)
    if not view.is_valid:
        return INVALID
    if view.length == 0 or pred is None:
        return view
    cut = _trailing(view, pred)
    if cut == view.length:
        return EMPTY
    return view.take(view.length - cut)


def trim(view: ReadView, pred: Predicate | None) -> ReadView:
    """Drop matching bytes from both ends of *view*.

    Examples
    --------
    >>> from bytespan.predicates import is_space
    >>> from bytespan.view import from_cstr
    >>> bytes(trim(from_cstr("  key = value \\n"), is_space))
    b'key = value'
    """
    check_predicate(pred)
    if not view.is_valid:
        return INVALID
    if view.length == 0 or pred is None:
        return view
    start = _leading(view, pred)
    if start == view.length:
        return EMPTY
    cut = _trailing(view, pred, floor=start)
    return ReadView(view.buf, view.offset + start, view.length - start - cut)
