"""Equality, ordering and prefix/suffix tests over read views.

All comparisons are on raw unsigned byte values.  :data:`INVALID` is
handled explicitly: it equals only itself and sorts before every valid
view.
"""

from __future__ import annotations

from bytespan.models import ReadView


def equals(a: ReadView, b: ReadView) -> bool:
    """Return ``True`` when *a* and *b* view identical bytes.

    Two :data:`INVALID` views are equal; an invalid view never equals a
    valid one.  All zero-length valid views (including ``NOT_FOUND``)
    are equal to each other.
    """
    if not a.is_valid or not b.is_valid:
        return a.is_valid == b.is_valid
    if a.length != b.length:
        return False
    if a.length == 0:
        return True
    return a.window() == b.window()


def compare(a: ReadView, b: ReadView) -> int:
    """Three-way comparison returning ``-1``, ``0`` or ``1``.

    The order is total: ``INVALID`` < every valid view; among valid views
    the first differing byte decides, and when one is a prefix of the
    other the shorter sorts first.

    Examples
    --------
    >>> from bytespan.view import from_cstr
    >>> compare(from_cstr("apple"), from_cstr("apricot"))
    -1
    >>> compare(from_cstr("abc"), from_cstr("ab"))
    1
    """
    if not a.is_valid or not b.is_valid:
        if a.is_valid == b.is_valid:
            return 0
        return -1 if not a.is_valid else 1

    x, y = bytes(a), bytes(b)
    return (x > y) - (x < y)


def starts_with(view: ReadView, prefix: ReadView) -> bool:
    """Return ``True`` if *view* begins with the bytes of *prefix*.

    Always ``False`` when either operand is invalid; always ``True`` for a
    zero-length *prefix* on a valid *view*.
    """
    if not view.is_valid or not prefix.is_valid:
        return False
    if prefix.length == 0:
        return True
    if prefix.length > view.length:
        return False
    return view.window()[:prefix.length] == prefix.window()


def ends_with(view: ReadView, suffix: ReadView) -> bool:
    """Return ``True`` if *view* ends with the bytes of *suffix*."""
    if not view.is_valid or not suffix.is_valid:
        return False
    if suffix.length == 0:
        return True
    if suffix.length > view.length:
        return False
    return view.window()[view.length - suffix.length:] == suffix.window()
