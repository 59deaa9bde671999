"""Finding the line a symbol is defined on inside a resolved module."""

import re

EXPORT_DEFAULT_RE = re.compile(r"export default")


def locate_export(source_text: str, symbol: str | None = None) -> int:
    """Return the 0-based line of the symbol's export.

    Falls back to the first ``export default`` line, then to the first line.
    """
    lines = source_text.splitlines()
    if symbol:
        named = re.compile(rf"export.*{re.escape(symbol)}(\s|[(])+")
        for i, line in enumerate(lines):
            if named.search(line):
                return i
    for i, line in enumerate(lines):
        if EXPORT_DEFAULT_RE.search(line):
            return i
    return 0
