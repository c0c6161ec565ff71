#!/usr/bin/env python3
"""Check for banned Python constructions in shellquote source.

    Construction          Reason                            Use instead
    --------------------  --------------------------------  --------------------------
    import shlex          shellquote is the quoting         shellquote.core.sh / bash
    from shlex import     authority, not stdlib
    import pipes          removed in Python 3.13            shellquote.core.sh
    .decode("latin-1")    hides non-ASCII output            .decode("ascii")
"""

import ast
import sys
from pathlib import Path

BANNED_MODULES = frozenset({"shlex", "pipes"})
BANNED_ENCODINGS = frozenset({"latin-1", "latin1", "iso-8859-1"})


def _imported_modules(node):
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]
    if isinstance(node, ast.ImportFrom) and node.module:
        return [node.module]
    return []


def _is_latin1_decode(node):
    return (
        isinstance(node, ast.Call)
        and isinstance(node.func, ast.Attribute)
        and node.func.attr == "decode"
        and bool(node.args)
        and isinstance(node.args[0], ast.Constant)
        and str(node.args[0].value).lower() in BANNED_ENCODINGS
    )


def check_source(source, filename="<src>"):
    """Return (lineno, description) for each banned construction."""
    errors = []
    for node in ast.walk(ast.parse(source, filename)):
        for module in _imported_modules(node):
            if module.split(".")[0] in BANNED_MODULES:
                errors.append((node.lineno, f"import {module}: banned, use shellquote quoters"))
        if _is_latin1_decode(node):
            errors.append((node.lineno, "decode(latin-1): banned, quoted output is ASCII"))
    return errors


def main():
    src_dir = Path(sys.argv[1] if len(sys.argv) > 1 else "src")
    files = sorted(src_dir.rglob("*.py"))
    if not files:
        print(f"No Python files found in: {src_dir}")
        sys.exit(1)

    found = []
    for path in files:
        try:
            found.extend((str(path), lineno, desc) for lineno, desc in check_source(path.read_text(), str(path)))
        except SyntaxError as e:
            print(f"Syntax error in {path}: {e}")
            sys.exit(1)

    for filepath, lineno, description in found:
        print(f"  {filepath}:{lineno}: {description}")
    sys.exit(1 if found else 0)


if __name__ == "__main__":
    main()
