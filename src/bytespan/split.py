"""Two-way splitting of a view at a byte or predicate boundary.

Every split returns a :class:`SplitResult` ``(before, after)``.  When the
split point is found at index ``i``, ``before`` is ``view[0:i]`` and
``after`` is ``view[i:]`` -- the matching byte stays at the head of
``after`` so repeated splits can inspect it.

Failure outcomes differ by variant:

=====================  ==========================  ==========================
variant                split point not found        invalid subject/predicate
=====================  ==========================  ==========================
split_at_char          (NOT_FOUND, NOT_FOUND)       (INVALID, INVALID)
split_by_pred          (view, EMPTY at end)         (INVALID, INVALID)
split_by_not_pred      (NOT_FOUND, NOT_FOUND)       (INVALID, INVALID)
=====================  ==========================  ==========================
"""

from __future__ import annotations

from typing import NamedTuple

from bytespan.models import EMPTY, INVALID, NOT_FOUND, Predicate, ReadView
from bytespan.search import index_of
from bytespan.view import check_predicate, to_byte


class SplitResult(NamedTuple):
    """The two halves of a split."""

    before: ReadView
    after: ReadView


_INVALID_SPLIT = SplitResult(INVALID, INVALID)
_NOT_FOUND_SPLIT = SplitResult(NOT_FOUND, NOT_FOUND)


def _split_at(view: ReadView, index: int) -> SplitResult:
    if index < 0:
        return _NOT_FOUND_SPLIT
    return SplitResult(view.take(index), view.drop(index))


def _first(view: ReadView, pred: Predicate, wanted: bool) -> int:
    for i, byte in enumerate(view.window()):
        if bool(pred(byte)) is wanted:
            return i
    return -1


def split_at_char(view: ReadView, ch: int | bytes | str) -> SplitResult:
    """Split *view* at the first occurrence of *ch*.

    Examples
    --------
    >>> from bytespan.view import from_cstr
    >>> before, after = split_at_char(from_cstr("key=value"), "=")
    >>> bytes(before), bytes(after)
    (b'key', b'=value')
    """
    byte = to_byte(ch)
    if not view.is_valid:
        return _INVALID_SPLIT
    return _split_at(view, index_of(view, byte))


def split_by_pred(view: ReadView, pred: Predicate | None) -> SplitResult:
    """Split *view* at the first byte satisfying *pred*.

    Unlike the other variants, a missing split point is not reported as
    ``NOT_FOUND``: the whole of *view* is returned as ``before`` and
    ``after`` is an empty view positioned at the end of *view*.
    """
    check_predicate(pred)
    if not view.is_valid or pred is None:
        return _INVALID_SPLIT
    index = _first(view, pred, True)
    if index < 0:
        end = view.drop(view.length) if view.buf is not None else EMPTY
        return SplitResult(view, end)
    return _split_at(view, index)


def split_by_not_pred(view: ReadView, pred: Predicate | None) -> SplitResult:
    """Split *view* at the first byte *not* satisfying *pred*.

    Examples
    --------
    >>> from bytespan.predicates import is_digit
    >>> from bytespan.view import from_cstr
    >>> before, after = split_by_not_pred(from_cstr("123abc"), is_digit)
    >>> bytes(before), bytes(after)
    (b'123', b'abc')
    """
    check_predicate(pred)
    if not view.is_valid or pred is None:
        return _INVALID_SPLIT
    return _split_at(view, _first(view, pred, False))
