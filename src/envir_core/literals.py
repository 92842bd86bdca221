"""Literal detectors: integers, floats and booleans.

Each ``parse_*`` function returns the decoded payload, or ``None`` when the
text is not a literal of that kind.  A lexical match whose digits cannot be
decoded (e.g. a hexadecimal run wider than a signed 64-bit integer) counts
as no match.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

_DEC_RE = re.compile(r"[+-]?[0-9]{1,19}")
_HEX_RE = re.compile(r"0x([0-9A-Fa-f]{1,16})")
_OCT_RE = re.compile(r"0o([0-7]{1,32})")
_BIN_RE = re.compile(r"0b([01]{1,64})")

# Tried in this order; the forms are mutually exclusive.
_INT_FORMS: tuple[tuple[re.Pattern[str], int], ...] = (
    (_DEC_RE, 10),
    (_HEX_RE, 16),
    (_OCT_RE, 8),
    (_BIN_RE, 2),
)


def _decode_int(pattern: re.Pattern[str], text: str, base: int) -> int | None:
    m = pattern.fullmatch(text)
    if m is None:
        return None
    digits = m.group(m.lastindex or 0)
    value = int(digits, base)
    if not INT64_MIN <= value <= INT64_MAX:
        logger.debug("integer %r overflows 64 bits (base %d)", text, base)
        return None
    return value


def parse_int(text: str) -> int | None:
    """Decode a decimal, ``0x`` hex, ``0o`` octal or ``0b`` binary integer."""
    for pattern, base in _INT_FORMS:
        value = _decode_int(pattern, text, base)
        if value is not None:
            return value
    return None


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------

_FLOAT_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?i:inf|infinity|nan)
      | (?:[0-9]+\.?[0-9]*|\.[0-9]+)   # integer part and/or fraction
        (?:[eE][+-]?[0-9]+)?           # exponent
    )
    """,
    re.VERBOSE,
)


def parse_float(text: str) -> float | None:
    """Decode a decimal or scientific literal, ``inf`` or ``nan``."""
    if _FLOAT_RE.fullmatch(text) is None:
        return None
    try:
        return float(text)
    except ValueError:
        logger.debug("float literal %r failed to decode", text)
        return None


# ---------------------------------------------------------------------------
# Booleans
# ---------------------------------------------------------------------------

_BOOL_WORDS: dict[str, bool] = {
    "t": True,
    "T": True,
    "true": True,
    "TRUE": True,
    "f": False,
    "F": False,
    "false": False,
    "FALSE": False,
}


def parse_bool(text: str) -> bool | None:
    """Map the fixed boolean spellings to ``True``/``False``.

    Mixed case such as ``True`` is not a boolean.
    """
    return _BOOL_WORDS.get(text)
