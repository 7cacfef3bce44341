"""Library configuration for bytespan.

:class:`BytespanConfig` captures the few process-wide knobs the library
exposes.  View operations are plain functions, so the active
configuration is held at module level and swapped with
:func:`configure`::

    from bytespan import configure

    configure(cstr_max_scan=256, log_level="DEBUG")
"""

from __future__ import annotations

import codecs
import dataclasses
from dataclasses import dataclass

from bytespan.observability.logger import resolve_level, set_level

# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BytespanConfig:
    """Complete configuration for the library.

    Parameters
    ----------
    text_encoding:
        Codec used when a ``str`` is passed where bytes are expected
        (``from_cstr("...")``, ``find_char(view, "=")``).  Views themselves
        are byte-oriented and never decode.
    cstr_max_scan:
        Upper bound on the NUL-terminator scan performed by
        :func:`~bytespan.view.from_cstr`.  ``None`` scans the whole
        buffer.  When no terminator is found within the bound the view
        covers the first ``cstr_max_scan`` bytes.
    log_level:
        Level applied to every ``bytespan.*`` logger.
    """

    text_encoding: str = "utf-8"

    cstr_max_scan: int | None = None

    log_level: str | int = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        try:
            codecs.lookup(self.text_encoding)
        except LookupError as exc:
            raise ValueError(f"unknown text_encoding {self.text_encoding!r}") from exc
        if self.cstr_max_scan is not None and self.cstr_max_scan < 0:
            raise ValueError(f"cstr_max_scan must be >= 0, got {self.cstr_max_scan}")
        resolve_level(self.log_level)


_active = BytespanConfig()


def get_config() -> BytespanConfig:
    """Return the configuration currently in effect."""
    return _active


def configure(config: BytespanConfig | None = None, **overrides: object) -> BytespanConfig:
    """Install a new active configuration and return it.

    *overrides* are applied on top of *config* (or of the current
    configuration when *config* is omitted).
    """
    global _active
    base = config if config is not None else _active
    new = dataclasses.replace(base, **overrides) if overrides else base
    _active = new
    set_level(new.log_level)
    return new


def reset_config() -> BytespanConfig:
    """Restore the default configuration."""
    return configure(BytespanConfig())
