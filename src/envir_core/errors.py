"""Exceptions raised by envir_core."""

from __future__ import annotations


class EnvirError(Exception):
    """Base class for envir_core errors."""


class UndefinedKeyError(EnvirError, KeyError):
    """A name was required but is not present in the snapshot."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"undefined environment key: {self.name!r}"
