"""Value inference: raw text → the most specific Value it can represent."""

from __future__ import annotations

import logging
from typing import Callable

from .addresses import parse_ip, parse_socket
from .literals import parse_bool, parse_float, parse_int
from .values import (
    Value,
    VArray,
    VBool,
    VFloat,
    VInt,
    VIpAddr,
    VSocketAddr,
    VText,
)

logger = logging.getLogger(__name__)

DELIMITER = ":"


def _int(raw: str) -> Value | None:
    value = parse_int(raw)
    return None if value is None else VInt(value, raw)


def _float(raw: str) -> Value | None:
    value = parse_float(raw)
    return None if value is None else VFloat(value, raw)


def _bool(raw: str) -> Value | None:
    value = parse_bool(raw)
    return None if value is None else VBool(value, raw)


def _socket(raw: str) -> Value | None:
    value = parse_socket(raw)
    return None if value is None else VSocketAddr(value, raw)


def _ip(raw: str) -> Value | None:
    value = parse_ip(raw)
    return None if value is None else VIpAddr(value, raw)


# Most restrictive grammar first.  Sockets precede the array split so that
# "127.0.0.1:8080" is an address rather than two segments.
_CASCADE: tuple[Callable[[str], Value | None], ...] = (
    _int,
    _float,
    _bool,
    _socket,
    _ip,
)


def build_value(raw: str) -> Value:
    """Infer the typed Value for *raw*.

    Tries, in order: integer, float, boolean, socket address, IP address,
    ``:``-delimited array.  Falls back to ``VText(raw)``.  Never raises.
    """
    for detect in _CASCADE:
        value = detect(raw)
        if value is not None:
            return value
    value = split_array(raw)
    if value is not None:
        return value
    return VText(raw)


def split_array(raw: str) -> Value | None:
    """Split *raw* on ``:`` and infer each trimmed, non-empty segment.

    - no delimiter / no non-empty segment → ``None``
    - one segment → that segment's own Value (no single-item arrays)
    - otherwise → ``VArray`` whose ``raw`` is the untouched input

    Example::

        split_array("a: 1 :")   → VArray((VText("a"), VInt(1, "1")), "a: 1 :")
        split_array("lonely:")  → VText("lonely")
        split_array(" : ")      → None
    """
    if DELIMITER not in raw:
        return None
    segments = [s.strip() for s in raw.split(DELIMITER)]
    items = [build_value(s) for s in segments if s]
    return _collapse(items, raw)


def _collapse(items: list[Value], raw: str) -> Value | None:
    """Return None, the single value, or a VArray."""
    if len(items) == 0:
        return None
    if len(items) == 1:
        logger.debug("collapsed %r to a single segment", raw)
        return items[0]
    return VArray(tuple(items), raw)
