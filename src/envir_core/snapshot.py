"""Snapshot — a read-only, point-in-time view of the environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping
from ipaddress import IPv4Address, IPv6Address
from types import MappingProxyType
from typing import Union

from . import accessors
from .builder import build_value
from .errors import UndefinedKeyError
from .values import Empty, IpAddress, SocketAddress, Value, _Empty

logger = logging.getLogger(__name__)

Source = Union[Mapping[str, str], Iterable[tuple[str, str]]]


class Snapshot(Mapping[str, Value]):
    """Names mapped to inferred Values, captured once.

    Usage::

        env = Snapshot.build()                 # from os.environ
        env.get_int("WORKERS")                 # → 4 or None
        env.get("MISSING")                     # → Empty
        Snapshot.build({"PORT": "8080"})       # any mapping or pairs

    A snapshot never re-reads its source and has no mutating methods, so
    one instance can be shared between threads without locking.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Value] | None = None) -> None:
        self._data: Mapping[str, Value] = MappingProxyType(dict(data or {}))

    @classmethod
    def build(cls, source: Source | None = None) -> "Snapshot":
        """Infer a Value for every ``(name, text)`` pair in *source*.

        *source* defaults to ``os.environ``.  For an iterable of pairs a
        later duplicate name replaces an earlier one.
        """
        if source is None:
            source = os.environ
        pairs = source.items() if isinstance(source, Mapping) else source
        data = {name: build_value(text) for name, text in pairs}
        logger.debug("built environment snapshot with %d entries", len(data))
        return cls(data)

    # -- Mapping protocol -----------------------------------------------

    def __getitem__(self, name: str) -> Value:
        try:
            return self._data[name]
        except KeyError:
            raise UndefinedKeyError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Snapshot({len(self._data)} entries)"

    # -- Lookup ---------------------------------------------------------

    def get(self, name: str) -> Value | _Empty:  # type: ignore[override]
        """Return the Value for *name*, or ``Empty`` if it is not set."""
        return self._data.get(name, Empty)

    def require(self, name: str) -> Value:
        """Return the Value for *name*; raise UndefinedKeyError if unset."""
        return self[name]

    # -- Typed getters ----------------------------------------------------

    def get_str(self, name: str) -> str | None:
        return accessors.as_str(self.get(name))

    def get_bool(self, name: str) -> bool | None:
        return accessors.as_bool(self.get(name))

    def get_int(self, name: str) -> int | None:
        return accessors.as_int(self.get(name))

    def get_float(self, name: str) -> float | None:
        return accessors.as_float(self.get(name))

    def get_socket(self, name: str) -> SocketAddress | None:
        return accessors.as_socket(self.get(name))

    def get_ip(self, name: str) -> IpAddress | None:
        return accessors.as_ip(self.get(name))

    def get_ipv4(self, name: str) -> IPv4Address | None:
        return accessors.as_ipv4(self.get(name))

    def get_ipv6(self, name: str) -> IPv6Address | None:
        return accessors.as_ipv6(self.get(name))

    def get_array(self, name: str) -> tuple[Value, ...] | None:
        return accessors.as_array(self.get(name))
