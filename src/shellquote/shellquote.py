"""Command-line entry point: quote words for a shell.

Usage:
    shellquote [--bash | --sh] [--] WORD...
    printf 'raw\\0bytes' | shellquote --sh

Each WORD is quoted on its own and the results are printed on one line,
separated by spaces. With no WORD, all of stdin is read as raw bytes and
quoted as a single word.

Exit codes:
- 0: Success.
- 1: Input could not be quoted (NUL byte) or config is invalid.
- 2: Usage error.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from shellquote.core.ascii import QuoteError
from shellquote.core.config import configure_logging, load_config, log_quote
from shellquote.core.dialect import Dialect, quote_into

USAGE = "usage: shellquote [--bash | --sh] [--] WORD..."

DIALECT_FLAGS = {
    "--bash": Dialect.BASH,
    "--sh": Dialect.SH,
}


def parse_args(argv: list[str]) -> tuple[Dialect | None, list[bytes]]:
    """Split argv into a dialect flag and the words to quote.

    Words are taken as the bytes the OS passed in (os.fsencode undoes the
    surrogateescape decoding of sys.argv).
    """
    dialect = None
    words: list[bytes] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            words.extend(os.fsencode(a) for a in argv[i + 1 :])
            break
        if arg in DIALECT_FLAGS:
            dialect = DIALECT_FLAGS[arg]
        elif arg.startswith("-") and arg != "-":
            raise ValueError(f"unknown option '{arg}'")
        else:
            words.append(os.fsencode(arg))
        i += 1
    return dialect, words


def quote_words(words: list[bytes], dialect: Dialect) -> bytes:
    """Quote each word and join with spaces."""
    out = bytearray()
    for n, word in enumerate(words):
        if n:
            out += b" "
        try:
            quote_into(word, out, dialect)
        except QuoteError as e:
            log_quote("rejected", dialect, len(word), data=word, error=str(e))
            raise
        log_quote("quoted", dialect, len(word), data=word)
    return bytes(out)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv[:1] in (["-h"], ["--help"]):
        print(USAGE)
        return 0

    try:
        flag_dialect, words = parse_args(argv)
    except ValueError as e:
        print(f"shellquote: {e}\n{USAGE}", file=sys.stderr)
        return 2

    try:
        config = load_config(Path.cwd())
    except ValueError as e:
        print(f"shellquote: config error: {e}", file=sys.stderr)
        return 1
    try:
        configure_logging(config)
    except OSError as e:
        print(f"shellquote: config error: cannot open log: {e}", file=sys.stderr)
        return 1

    dialect = flag_dialect or config.effective_dialect
    if not words:
        words = [sys.stdin.buffer.read()]

    try:
        output = quote_words(words, dialect)
    except QuoteError as e:
        print(f"shellquote: {e}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(output + b"\n")
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
