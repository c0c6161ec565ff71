"""Adapters between Python values and the byte-level quoters.

Every input goes through ``as_bytes`` before reaching a quoter; every
quoter emits only ASCII, so ``quoted`` can decode without error handling.
"""

from __future__ import annotations

import io
import os
from typing import IO, Union

from shellquote.core import dialect as _dialect
from shellquote.core.dialect import Dialect

Quotable = Union[bytes, bytearray, memoryview, str, "os.PathLike[str]", "os.PathLike[bytes]"]


def as_bytes(source: Quotable) -> bytes | bytearray | memoryview:
    """Reduce source to the bytes a shell would see.

    str is encoded as UTF-8 with surrogateescape, so strings produced by
    os.fsdecode() (e.g. from os.listdir) come back as their original bytes.
    """
    if isinstance(source, (bytes, bytearray)):
        return source
    if isinstance(source, memoryview):
        return source.cast("B") if source.format != "B" else source
    if isinstance(source, str):
        return source.encode("utf-8", "surrogateescape")
    if isinstance(source, os.PathLike):
        return os.fsencode(source)
    raise TypeError(f"cannot quote {type(source).__name__!r}, expected bytes, str or path")


def quoted_bytes(source: Quotable, dialect: Dialect = Dialect.BASH) -> bytes:
    """Quote source as one shell word and return the bytes."""
    return _dialect.quote(as_bytes(source), dialect)


def quoted(source: Quotable, dialect: Dialect = Dialect.BASH) -> str:
    """Quote source as one shell word and return it as text."""
    return quoted_bytes(source, dialect).decode("ascii")


def _is_text_stream(target) -> bool:
    if isinstance(target, io.TextIOBase):
        return True
    return "b" not in getattr(target, "mode", "b")


def push_quoted(
    target: bytearray | list[str] | IO[str] | IO[bytes],
    source: Quotable,
    dialect: Dialect = Dialect.BASH,
) -> None:
    """Append source, quoted, to target.

    A bytearray is extended in place. A list receives one str. Anything
    else is treated as a stream: io text streams and files opened without
    "b" in their mode get str, everything else gets bytes.
    """
    data = as_bytes(source)
    if isinstance(target, bytearray):
        _dialect.quote_into(data, target, dialect)
        return
    word = _dialect.quote(data, dialect)
    if isinstance(target, list):
        target.append(word.decode("ascii"))
    elif _is_text_stream(target):
        target.write(word.decode("ascii"))
    else:
        target.write(word)


def join(words: list[Quotable], dialect: Dialect = Dialect.BASH) -> str:
    """Quote each word on its own and join them with spaces."""
    return " ".join(quoted(w, dialect) for w in words)
