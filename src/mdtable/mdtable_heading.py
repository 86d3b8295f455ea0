"""Classification of lines that can start a table."""

from enum import IntEnum, auto
import re

from mdtable.mdtable_types import TableDialect


# The alternatives are tried in order.  A pipe separator row never matches the
# simple rule (it needs a pipe) and a grid rule never matches the pipe row (it
# needs a plus), so at most one group captures for any line.
_TABLE_HEADING_RE = re.compile(
    r'^(\s*-+[-\s]*)$'
    r'|^(\+[-=+:]+\+)$'
    r'|^(\|?\s*:?-+:?\s*(?:\|\s*:?-+:?\s*)+\|?|\|\s*:?-+:?\s*\|)$'
)

_DASHES_RE = re.compile(r'^-+$')


class HeadingKind(IntEnum):
    """What kind of table, if any, a line could introduce."""
    NONE = auto()
    SIMPLE = auto()
    GRID = auto()
    PIPE = auto()

    def dialect(self) -> TableDialect | None:
        """
        Map the heading kind onto a table dialect.

        Returns:
            The matching dialect, or None for HeadingKind.NONE
        """
        return _DIALECTS.get(self)


_DIALECTS = {
    HeadingKind.SIMPLE: TableDialect.SIMPLE,
    HeadingKind.GRID: TableDialect.GRID,
    HeadingKind.PIPE: TableDialect.PIPE,
}


def classify_heading(line: str) -> HeadingKind:
    """
    Classify a line against the table heading pattern.

    Args:
        line: Line text, without a line terminator.  Trailing whitespace is ignored

    Returns:
        The heading kind for the first alternative that matched
    """
    match = _TABLE_HEADING_RE.match(line.rstrip())
    if match is None:
        return HeadingKind.NONE

    if match.group(1):
        return HeadingKind.SIMPLE

    if match.group(2):
        return HeadingKind.GRID

    return HeadingKind.PIPE


def is_blank(line: str | None) -> bool:
    """Return True for a missing line or one holding only whitespace."""
    return line is None or line.strip() == ''


def is_dash_rule(line: str) -> bool:
    """Return True if a line is made only of dashes (surrounding whitespace ignored)."""
    return _DASHES_RE.match(line.strip()) is not None
