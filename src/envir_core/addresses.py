"""Address detectors: bare IP addresses and ``ip:port`` socket addresses."""

from __future__ import annotations

import logging
import re
from ipaddress import IPv4Address, IPv6Address

from .values import IpAddress, SocketAddress

logger = logging.getLogger(__name__)

_PORT_MAX = 65535

_SOCKET_V4_RE = re.compile(r"([0-9.]+):([0-9]{1,5})")
_SOCKET_V6_RE = re.compile(r"\[([0-9A-Fa-f:.]+)\]:([0-9]{1,5})")
_IP_V6_RE = re.compile(r"[0-9A-Fa-f:.]+")


def _ipv4(text: str) -> IPv4Address | None:
    try:
        return IPv4Address(text)
    except ValueError:
        return None


def _ipv6(text: str) -> IPv6Address | None:
    # Zone ids ("fe80::1%eth0") are excluded by the character class.
    if _IP_V6_RE.fullmatch(text) is None:
        return None
    try:
        return IPv6Address(text)
    except ValueError:
        return None


def parse_ip(text: str) -> IpAddress | None:
    """Decode a bare IPv4 or IPv6 address."""
    ip = _ipv4(text)
    if ip is not None:
        return ip
    return _ipv6(text)


def parse_socket(text: str) -> SocketAddress | None:
    """Decode ``a.b.c.d:port`` or ``[ipv6]:port``.

    Host names are not resolved, so ``localhost:80`` is not a socket
    address.
    """
    m = _SOCKET_V4_RE.fullmatch(text)
    if m is not None:
        ip: IpAddress | None = _ipv4(m.group(1))
    else:
        m = _SOCKET_V6_RE.fullmatch(text)
        if m is None:
            return None
        ip = _ipv6(m.group(1))
    if ip is None:
        logger.debug("socket address %r has an invalid host", text)
        return None
    port = int(m.group(2))
    if port > _PORT_MAX:
        logger.debug("socket address %r has an out-of-range port", text)
        return None
    return SocketAddress(ip, port)
