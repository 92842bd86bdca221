"""Value types for envir_core."""

from __future__ import annotations

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import Union

IpAddress = Union[IPv4Address, IPv6Address]


# ---------------------------------------------------------------------------
# SocketAddress
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SocketAddress:
    ip: IpAddress
    port: int

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------
# Every variant keeps ``raw``: the exact text it was inferred from.

@dataclass(frozen=True, slots=True)
class VText:
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class VInt:
    value: int  # always within signed 64-bit range
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class VFloat:
    value: float
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class VSocketAddr:
    value: SocketAddress
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class VIpAddr:
    value: IpAddress
    raw: str

    def __str__(self) -> str:
        return self.raw


@dataclass(frozen=True, slots=True)
class VArray:
    items: tuple["Value", ...]
    raw: str  # the whole un-split text, not a re-join of the items

    def __str__(self) -> str:
        return self.raw


Value = Union[VText, VBool, VInt, VFloat, VSocketAddr, VIpAddr, VArray]


# ---------------------------------------------------------------------------
# Empty — singleton for missing keys
# ---------------------------------------------------------------------------

class _Empty:
    """Singleton returned when a name is not present in a snapshot."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Empty"


Empty = _Empty()
