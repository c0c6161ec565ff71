"""Dialect selection.

Only the two dialects below exist. Both emit nothing but ASCII, which is
what lets callers decode quoted output as text without checking it.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from shellquote.core import bash, sh


class Dialect(Enum):
    BASH = "bash"
    SH = "sh"

    @classmethod
    def parse(cls, name: str) -> Dialect:
        """Look up a dialect by name, case-insensitively."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"unknown dialect '{name}', expected one of: {choices}") from None


_QUOTE_INTO: dict[Dialect, Callable[[bytes, bytearray], None]] = {
    Dialect.BASH: bash.quote_into,
    Dialect.SH: sh.quote_into,
}


def quote_into(data: bytes, out: bytearray, dialect: Dialect) -> None:
    """Append data, quoted as one word for dialect, to out."""
    _QUOTE_INTO[dialect](data, out)


def quote(data: bytes, dialect: Dialect) -> bytes:
    """Return data quoted as one word for dialect."""
    out = bytearray()
    quote_into(data, out, dialect)
    return bytes(out)
