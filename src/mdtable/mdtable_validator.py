"""Sanity checks applied to detected table spans before they are rendered."""

from enum import Enum
import logging
from typing import Iterable

from mdtable.mdtable_host import TableHost
from mdtable.mdtable_types import LineRange, TableSpan, TextMode


class SpanRejection(Enum):
    """Reason a detected span must not be rendered."""
    CURSOR_INSIDE = "cursor inside span"
    OVERLAPS_BINDING = "span overlaps an existing binding"
    OVERLAPS_ACCEPTED = "span overlaps a span accepted in this pass"
    MODE_MISMATCH = "span boundary is not Markdown"


class TableSpanValidator:
    """
    Rejects spans that are unsafe to replace with a rendered table.

    None of the rejections are errors: they happen all the time while the
    user types, and the span is simply looked at again on the next pass.
    """

    def __init__(self, host: TableHost) -> None:
        """
        Initialize the validator.

        Args:
            host: Editor host supplying the cursor, markers and modes
        """
        self._host = host
        self._logger = logging.getLogger("TableSpanValidator")

    def check(self, span: TableSpan, accepted: Iterable[LineRange] = ()) -> SpanRejection | None:
        """
        Check whether a span may be rendered.

        Args:
            span: Detected span
            accepted: Spans already accepted during the current pass

        Returns:
            The reason the span was rejected, or None if it is acceptable
        """
        line_range = span.line_range

        # Never replace text the user is editing
        if line_range.contains(self._host.cursor_line()):
            return SpanRejection.CURSOR_INSIDE

        # We can only have one marker at any given position at any given time
        if self._host.find_markers(line_range):
            return SpanRejection.OVERLAPS_BINDING

        if any(line_range.overlaps(other) for other in accepted):
            return SpanRejection.OVERLAPS_ACCEPTED

        # The closing delimiter of a frontmatter block only turns back into
        # Markdown at its last character, so check the first character of
        # both boundary lines.
        if self._host.mode_at(line_range.first, 0) != TextMode.MARKDOWN or \
                self._host.mode_at(line_range.last, 0) != TextMode.MARKDOWN:
            return SpanRejection.MODE_MISMATCH

        return None

    def accept(self, span: TableSpan, accepted: Iterable[LineRange] = ()) -> bool:
        """
        Check whether a span may be rendered, logging any rejection.

        Args:
            span: Detected span
            accepted: Spans already accepted during the current pass

        Returns:
            True if the span may be rendered
        """
        rejection = self.check(span, accepted)
        if rejection is None:
            return True

        self._logger.debug(
            "Rejected %s table at lines %d-%d: %s",
            span.dialect.value, span.line_range.first, span.line_range.last, rejection.value
        )
        return False
