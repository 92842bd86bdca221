"""Typed accessors: project a Value onto its concrete payload.

Each ``as_*`` returns ``None`` when the value is of another kind (or is
``Empty``).  ``as_str`` succeeds for every Value.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address

from .values import (
    IpAddress,
    SocketAddress,
    Value,
    VArray,
    VBool,
    VFloat,
    VInt,
    VIpAddr,
    VSocketAddr,
    VText,
    _Empty,
)

_VALUE_TYPES = (VText, VBool, VInt, VFloat, VSocketAddr, VIpAddr, VArray)


def as_str(value: Value | _Empty) -> str | None:
    if isinstance(value, _VALUE_TYPES):
        return value.raw
    return None


def as_bool(value: Value | _Empty) -> bool | None:
    return value.value if isinstance(value, VBool) else None


def as_int(value: Value | _Empty) -> int | None:
    return value.value if isinstance(value, VInt) else None


def as_float(value: Value | _Empty) -> float | None:
    return value.value if isinstance(value, VFloat) else None


def as_socket(value: Value | _Empty) -> SocketAddress | None:
    return value.value if isinstance(value, VSocketAddr) else None


def as_ip(value: Value | _Empty) -> IpAddress | None:
    return value.value if isinstance(value, VIpAddr) else None


def as_ipv4(value: Value | _Empty) -> IPv4Address | None:
    ip = as_ip(value)
    return ip if isinstance(ip, IPv4Address) else None


def as_ipv6(value: Value | _Empty) -> IPv6Address | None:
    ip = as_ip(value)
    return ip if isinstance(ip, IPv6Address) else None


def as_array(value: Value | _Empty) -> tuple[Value, ...] | None:
    """Return the array's items; a scalar is not a one-item array."""
    return value.items if isinstance(value, VArray) else None
