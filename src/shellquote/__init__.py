"""
shellquote - Quote arbitrary bytes as a single bash or sh word.

Output always parses back to exactly the input bytes, and is always ASCII.
"""

from __future__ import annotations

__version__ = "0.1.0"

from shellquote.core.ascii import NulByteError, QuoteError
from shellquote.core.dialect import Dialect, quote, quote_into
from shellquote.quotable import as_bytes, join, push_quoted, quoted, quoted_bytes

__all__ = [
    "Dialect",
    "NulByteError",
    "QuoteError",
    "__version__",
    "as_bytes",
    "join",
    "push_quoted",
    "quote",
    "quote_into",
    "quoted",
    "quoted_bytes",
]
