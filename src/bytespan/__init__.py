"""bytespan — non-owning byte-string views over caller-owned buffers.

Public re-exports
-----------------

* **Types and sentinels:** :class:`ReadView`, :class:`MutableSegment`,
  :class:`ViewState`, :data:`EMPTY`, :data:`NOT_FOUND`, :data:`INVALID`,
  :data:`MUT_EMPTY`, :data:`SIZE_MAX`, :data:`END`
* **Construction and accessors:** :mod:`bytespan.view`
* **Operations:** comparison, search, slicing/trimming, splitting and the
  write cursor
* **Configuration:** :class:`BytespanConfig`, :func:`configure`
* **Errors:** :class:`BytespanError` and its subclasses

Usage::

    from bytespan import from_cstr, split_at_char, trim, is_space

    key, rest = split_at_char(from_cstr("  name = value"), "=")
    key = trim(key, is_space)          # ReadView(b'name')
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from bytespan.config import BytespanConfig, configure, get_config, reset_config

# ── Operations ──────────────────────────────────────────────────────────
from bytespan.compare import compare, ends_with, equals, starts_with
from bytespan.cursor import append, copy, written

# ── Errors ──────────────────────────────────────────────────────────────
from bytespan.errors import (
    BytespanError,
    ErrorCode,
    ViewArgumentError,
    ViewBoundsError,
)

# ── Types and sentinels ─────────────────────────────────────────────────
from bytespan.models import (
    EMPTY,
    END,
    INVALID,
    MUT_EMPTY,
    NOT_FOUND,
    SIZE_MAX,
    MutableSegment,
    Predicate,
    ReadView,
    ViewState,
)
from bytespan.predicates import (
    byte_in,
    is_alnum,
    is_alpha,
    is_digit,
    is_hex_digit,
    is_lower,
    is_printable,
    is_space,
    is_upper,
    negate,
)
from bytespan.search import (
    find_char,
    find_first_not_pred,
    find_pred,
    find_str,
    rfind_char,
    rfind_pred,
)
from bytespan.slicing import ltrim, rtrim, slice_view, trim
from bytespan.split import SplitResult, split_at_char, split_by_not_pred, split_by_pred

# ── View model ──────────────────────────────────────────────────────────
from bytespan.view import (
    buffer,
    from_buffer,
    from_cstr,
    is_empty,
    is_not_found,
    is_valid,
    length,
    mut_buffer,
    mut_from_buffer,
    mut_length,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Types and sentinels
    "ReadView",
    "MutableSegment",
    "ViewState",
    "Predicate",
    "EMPTY",
    "NOT_FOUND",
    "INVALID",
    "MUT_EMPTY",
    "SIZE_MAX",
    "END",
    # View model
    "from_cstr",
    "from_buffer",
    "mut_from_buffer",
    "is_valid",
    "is_not_found",
    "is_empty",
    "length",
    "buffer",
    "mut_buffer",
    "mut_length",
    # Comparison
    "equals",
    "compare",
    "starts_with",
    "ends_with",
    # Search
    "find_char",
    "rfind_char",
    "find_pred",
    "rfind_pred",
    "find_first_not_pred",
    "find_str",
    # Slice / trim / split
    "slice_view",
    "ltrim",
    "rtrim",
    "trim",
    "SplitResult",
    "split_at_char",
    "split_by_pred",
    "split_by_not_pred",
    # Write cursor
    "copy",
    "append",
    "written",
    # Predicates
    "is_space",
    "is_digit",
    "is_alpha",
    "is_alnum",
    "is_upper",
    "is_lower",
    "is_hex_digit",
    "is_printable",
    "byte_in",
    "negate",
    # Configuration
    "BytespanConfig",
    "configure",
    "get_config",
    "reset_config",
    # Errors
    "BytespanError",
    "ErrorCode",
    "ViewArgumentError",
    "ViewBoundsError",
]
