"""Extraction of the raw token under the cursor."""

import re

from ember_goto.file_kind import FileKind
from ember_goto.models import Reference

NAMESPACE_SEPARATOR = "::"

# Anything that cannot be part of an identifier; "." ends Foo.extend at Foo
SCRIPT_TERMINATOR_RE = re.compile(r"[^$\w\-]")
QUOTE_RE = re.compile(r"[\"'`]")
TEMPLATE_START_RE = re.compile(r"[#{(]")
TEMPLATE_END_RE = re.compile(r"\s")
TEMPLATE_CLEANUP_RE = re.compile(r"^/|[})].*$")
# Arguments and properties are never module references
TEMPLATE_NON_MODULE_RE = re.compile(r"^(@|this\.)")


def _scan(
    line_text: str,
    cursor_column: int,
    start_re: re.Pattern[str],
    end_re: re.Pattern[str],
) -> str:
    """Join the text between the nearest terminators around the cursor.

    A side without a terminator extends to the line boundary.
    """
    cursor_column = max(0, min(cursor_column, len(line_text)))
    before = line_text[:cursor_column]
    after = line_text[cursor_column:]

    start = 0
    for match in start_re.finditer(before):
        start = match.end()

    end_match = end_re.search(after)
    end = end_match.start() if end_match else len(after)

    return before[start:] + after[:end]


def _inside_string(line_text: str, cursor_column: int) -> bool:
    """Whether an odd number of quotes precedes the cursor."""
    cursor_column = max(0, min(cursor_column, len(line_text)))
    return len(QUOTE_RE.findall(line_text[:cursor_column])) % 2 == 1


def extract_raw_text(line_text: str, cursor_column: int, file_kind: FileKind) -> str:
    """Return the raw token under the cursor, or "" if there is none."""
    if file_kind is FileKind.SCRIPT:
        if _inside_string(line_text, cursor_column):
            # A module specifier: keep "/", "@" and leading "./" or "../"
            return _scan(line_text, cursor_column, QUOTE_RE, QUOTE_RE)
        return _scan(
            line_text, cursor_column, SCRIPT_TERMINATOR_RE, SCRIPT_TERMINATOR_RE
        )

    token = _scan(line_text, cursor_column, TEMPLATE_START_RE, TEMPLATE_END_RE)
    # The cursor may sit on a closing tag like {{/my-thing}}
    return TEMPLATE_CLEANUP_RE.sub("", token)


def extract_reference(
    line_text: str, cursor_column: int, file_kind: FileKind
) -> Reference | None:
    """Extract the reference under the cursor, or None if nothing usable is there."""
    raw_text = extract_raw_text(line_text, cursor_column, file_kind).strip()
    if not raw_text or raw_text == NAMESPACE_SEPARATOR:
        return None
    if file_kind is FileKind.TEMPLATE and TEMPLATE_NON_MODULE_RE.match(raw_text):
        return None

    if file_kind is FileKind.TEMPLATE:
        qualified = NAMESPACE_SEPARATOR in raw_text
    else:
        qualified = "/" in raw_text.strip("/")
    return Reference(
        raw_text=raw_text, is_namespace_qualified=qualified, file_kind=file_kind
    )
