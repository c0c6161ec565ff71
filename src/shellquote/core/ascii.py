"""Byte classification for shell quoting decisions."""

from __future__ import annotations

from enum import Enum


class QuoteError(ValueError):
    """Input that cannot be quoted as a single shell word."""


class NulByteError(QuoteError):
    """Input contains a NUL byte, which no shell word can carry."""

    def __init__(self, offset: int):
        super().__init__(f"NUL byte at offset {offset} cannot be passed to a shell")
        self.offset = offset


class ByteClass(Enum):
    BARE = "bare"  # safe outside any quoting
    LITERAL = "literal"  # printable, verbatim inside single quotes
    QUOTE = "quote"  # the single quote itself
    CONTROL = "control"  # 0x01-0x1F and DEL; literal in '', escaped in $''
    HIGH = "high"  # 0x80-0xFF; never emitted verbatim
    NUL = "nul"


BARE_PUNCTUATION = b"-_./,:@%+="


def _build_table() -> tuple[ByteClass, ...]:
    table = []
    for b in range(256):
        if b == 0:
            cls = ByteClass.NUL
        elif b >= 0x80:
            cls = ByteClass.HIGH
        elif b < 0x20 or b == 0x7F:
            cls = ByteClass.CONTROL
        elif b == ord("'"):
            cls = ByteClass.QUOTE
        elif chr(b).isalnum() or b in BARE_PUNCTUATION:
            cls = ByteClass.BARE
        else:
            cls = ByteClass.LITERAL
        table.append(cls)
    return tuple(table)


CLASSES = _build_table()

_BARE = frozenset(b for b in range(256) if CLASSES[b] is ByteClass.BARE)
_NEEDS_ESCAPE = frozenset(
    b for b in range(256) if CLASSES[b] in (ByteClass.CONTROL, ByteClass.HIGH)
)


def classify(byte: int) -> ByteClass:
    """Return the quoting class of a single byte value (0-255)."""
    return CLASSES[byte]


def is_bare(data: bytes) -> bool:
    """True if data is non-empty and every byte may appear unquoted."""
    return bool(data) and _BARE.issuperset(data)


def needs_escape(data: bytes) -> bool:
    """True if any byte is a control or high byte."""
    return not _NEEDS_ESCAPE.isdisjoint(data)


def check_no_nul(data: bytes) -> None:
    """Raise NulByteError if data contains a NUL byte."""
    if 0 in data:
        raise NulByteError(bytes(data).index(0))
