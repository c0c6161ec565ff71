"""Bash quoting.

Printable words use the same single-quote form as sh. As soon as a word
holds a control byte or a byte >= 0x80 the whole word switches to ANSI-C
quoting, ``$'...'``, where those bytes become backslash mnemonics or
``\\xHH`` escapes. ``$''`` is bash-specific, so it is only used when
plain single quotes would have to carry unprintable bytes.
"""

from __future__ import annotations

from shellquote.core import sh
from shellquote.core.ascii import (
    CLASSES,
    ByteClass,
    check_no_nul,
    is_bare,
    needs_escape,
)

ANSI_C_OPEN = b"$'"
ANSI_C_CLOSE = b"'"

MNEMONICS = {
    0x07: b"\\a",
    0x08: b"\\b",
    0x09: b"\\t",
    0x0A: b"\\n",
    0x0B: b"\\v",
    0x0C: b"\\f",
    0x0D: b"\\r",
    ord("\\"): b"\\\\",
    ord("'"): b"\\'",
}


def _escape_for(b: int) -> bytes:
    if b in MNEMONICS:
        return MNEMONICS[b]
    if CLASSES[b] in (ByteClass.CONTROL, ByteClass.HIGH, ByteClass.NUL):
        # Always two digits: bash reads at most two after \x.
        return b"\\x%02X" % b
    return bytes([b])


ESCAPES = tuple(_escape_for(b) for b in range(256))


def ansi_c_quote_into(data: bytes, out: bytearray) -> None:
    """Append data as one $'...' word."""
    out += ANSI_C_OPEN
    out += b"".join(ESCAPES[b] for b in data)
    out += ANSI_C_CLOSE


def quote_into(data: bytes, out: bytearray) -> None:
    """Append the bash-quoted form of data to out.

    Raises NulByteError (leaving out untouched) if data contains NUL.
    """
    check_no_nul(data)
    if not data:
        out += sh.EMPTY
    elif is_bare(data):
        out += data
    elif needs_escape(data):
        ansi_c_quote_into(data, out)
    else:
        sh.single_quote_into(data, out)


def quote(data: bytes) -> bytes:
    """Return data quoted for bash."""
    out = bytearray()
    quote_into(data, out)
    return bytes(out)
