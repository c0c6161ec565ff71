"""POSIX sh quoting.

Words are wrapped in single quotes, which preserve every byte except the
single quote itself. An embedded ``'`` closes the group, is emitted as
``\\'`` and the group is reopened only when more bytes follow, so
``it's`` becomes ``'it'\\''s'``.

Control bytes (newline, tab, BEL, ...) are kept literally inside the
quotes. Bytes >= 0x80 are written through ``"$(printf '\\NNN')"`` so the
output is always plain ASCII; ``printf`` octal escapes are POSIX and a
command substitution only strips trailing newlines, which a high byte
never is.
"""

from __future__ import annotations

from shellquote.core.ascii import CLASSES, ByteClass, check_no_nul, is_bare

OPEN = b"'"
CLOSE = b"'"
ESCAPED_QUOTE = b"\\'"
EMPTY = b"''"


def _printf_into(run: bytearray, out: bytearray) -> None:
    out += b"\"$(printf '"
    for b in run:
        out += b"\\%03o" % b
    out += b"')\""


def single_quote_into(data: bytes, out: bytearray) -> None:
    """Append data as one single-quoted word (no fast paths)."""
    in_quote = False
    high = bytearray()
    for b in data:
        cls = CLASSES[b]
        if cls is ByteClass.HIGH:
            if in_quote:
                out += CLOSE
                in_quote = False
            high.append(b)
            continue
        if high:
            _printf_into(high, out)
            high.clear()
        if cls is ByteClass.QUOTE:
            if in_quote:
                out += CLOSE
                in_quote = False
            out += ESCAPED_QUOTE
        else:
            if not in_quote:
                out += OPEN
                in_quote = True
            out.append(b)
    if high:
        _printf_into(high, out)
    if in_quote:
        out += CLOSE


def quote_into(data: bytes, out: bytearray) -> None:
    """Append the sh-quoted form of data to out.

    Raises NulByteError (leaving out untouched) if data contains NUL.
    """
    check_no_nul(data)
    if not data:
        out += EMPTY
    elif is_bare(data):
        out += data
    else:
        single_quote_into(data, out)


def quote(data: bytes) -> bytes:
    """Return data quoted for POSIX sh."""
    out = bytearray()
    quote_into(data, out)
    return bytes(out)
