#!/usr/bin/env python3
"""
Debug helper: quote a word and show how bash tokenizes the result.

Usage:
    python bin/quote-dump.py [--sh] 'word to quote'

Prints the quoted form, then each word bashlex finds in `printf <quoted>`
with its source span. A correctly quoted word is exactly one word after
printf.
"""

import sys

try:
    import bashlex
except ImportError:
    print("Error: bashlex not installed. Run: pip install bashlex")
    sys.exit(1)

from shellquote import Dialect, quoted


def command_words(line):
    """Return (word, span) pairs for the single command in line."""
    nodes = bashlex.parse(line)
    if len(nodes) != 1 or nodes[0].kind != "command":
        kinds = ", ".join(n.kind for n in nodes)
        raise ValueError(f"expected one simple command, got: {kinds}")
    return [(p.word, p.pos) for p in nodes[0].parts if p.kind == "word"]


def main():
    args = sys.argv[1:]
    dialect = Dialect.SH if args[:1] == ["--sh"] else Dialect.BASH
    if dialect is Dialect.SH:
        args = args[1:]
    if len(args) != 1:
        print("Usage: quote-dump.py [--sh] 'word'")
        sys.exit(1)

    word = quoted(args[0], dialect)
    print(f"Quoted ({dialect.value}): {word}")

    try:
        words = command_words(f"printf {word}")
    except (bashlex.errors.ParsingError, ValueError) as e:
        print(f"Parse error: {e}")
        sys.exit(1)

    for i, (text, span) in enumerate(words[1:], 1):
        print(f"word {i}: {text!r} at {span}")
    if len(words) != 2:
        print(f"warning: {len(words) - 1} words, expected 1")
        sys.exit(1)


if __name__ == "__main__":
    main()
