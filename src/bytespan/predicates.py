"""Ready-made byte predicates for the find, trim and split operations.

A predicate is any callable taking one byte (an ``int`` in ``0..255``)
and returning a truth value.  Context travels in a closure, as with
:func:`byte_in`.  Classification is ASCII-only; bytes ``>= 0x80`` never
match the character classes.
"""

from __future__ import annotations

from bytespan.config import get_config
from bytespan.models import Predicate

_SPACE = frozenset(b" \t\n\r\v\f")


def is_space(byte: int) -> bool:
    return byte in _SPACE


def is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def is_upper(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A


def is_lower(byte: int) -> bool:
    return 0x61 <= byte <= 0x7A


def is_alpha(byte: int) -> bool:
    return is_upper(byte) or is_lower(byte)


def is_alnum(byte: int) -> bool:
    return is_alpha(byte) or is_digit(byte)


def is_hex_digit(byte: int) -> bool:
    return is_digit(byte) or 0x41 <= byte <= 0x46 or 0x61 <= byte <= 0x66


def is_printable(byte: int) -> bool:
    """Printable ASCII, space included."""
    return 0x20 <= byte <= 0x7E


def byte_in(chars: bytes | str) -> Predicate:
    """Return a predicate matching any byte in *chars*.

    Examples
    --------
    >>> sep = byte_in(",;")
    >>> sep(ord(";")), sep(ord("a"))
    (True, False)
    """
    if isinstance(chars, str):
        chars = chars.encode(get_config().text_encoding)
    return frozenset(chars).__contains__


def negate(pred: Predicate) -> Predicate:
    """Return the complement of *pred*."""
    def inverted(byte: int) -> bool:
        return not pred(byte)
    return inverted
