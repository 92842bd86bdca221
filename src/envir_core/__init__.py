"""envir_core — common-sense typed values for environment variables."""

from .accessors import (
    as_array,
    as_bool,
    as_float,
    as_int,
    as_ip,
    as_ipv4,
    as_ipv6,
    as_socket,
    as_str,
)
from .builder import build_value, split_array
from .errors import EnvirError, UndefinedKeyError
from .repl import EnvirRepl
from .snapshot import Snapshot
from .values import (
    Empty,
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

__all__ = [
    "build_value",
    "split_array",
    "Snapshot",
    "EnvirRepl",
    "Empty",
    "Value",
    "VArray",
    "VBool",
    "VFloat",
    "VInt",
    "VIpAddr",
    "VSocketAddr",
    "VText",
    "SocketAddress",
    "EnvirError",
    "UndefinedKeyError",
    "as_array",
    "as_bool",
    "as_float",
    "as_int",
    "as_ip",
    "as_ipv4",
    "as_ipv6",
    "as_socket",
    "as_str",
]
