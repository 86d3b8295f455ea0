"""Detection of table spans in a document."""

import logging
from typing import Iterator, Tuple

from mdtable.mdtable_heading import HeadingKind, classify_heading, is_blank, is_dash_rule
from mdtable.mdtable_host import TableHost
from mdtable.mdtable_types import LineRange, TableDialect, TableSpan, TextMode


class TableSpanDetector:
    """
    Scans lines for table headings and expands each into a span of lines.

    Only the heading lines of a table are recognizable on their own (the rule
    under a simple table's title, a grid table's top border or a pipe table's
    separator row), so the detector looks for those and then works out where
    the table starts and ends.
    """

    def __init__(self, host: TableHost) -> None:
        """
        Initialize the detector.

        Args:
            host: Editor host supplying the document
        """
        self._host = host
        self._logger = logging.getLogger("TableSpanDetector")

    def detect(self, line_range: Tuple[int, int]) -> Iterator[TableSpan]:
        """
        Find candidate tables whose heading lies in a range of lines.

        The host may be modified between yielded spans (for example by
        marking a span); each line is read when the scan reaches it.

        Args:
            line_range: Half-open range (start, stop) of lines to scan

        Yields:
            Candidate spans, in document order and never overlapping
        """
        start, stop = line_range
        i = max(0, start)
        while i < stop:
            span = self._detect_at(i)
            if span is None:
                i += 1
                continue

            # Anything below the heading up to the end of the span belongs to
            # this table, including rows that look like headings themselves.
            i = span.line_range.last + 1
            if span.dialect == TableDialect.SIMPLE and self._is_setext_heading(span):
                self._logger.debug(
                    "Ignoring setext heading at lines %d-%d", span.line_range.first, span.line_range.last
                )
                continue

            yield span

    def _detect_at(self, i: int) -> TableSpan | None:
        """
        Work out the span of a table whose heading is on a given line.

        Args:
            i: Line index

        Returns:
            The span, or None if there is no table heading on this line
        """
        if self._host.mode_at(i, 0) != TextMode.MARKDOWN:
            return None

        line = self._host.line(i)
        if line is None:
            return None

        kind = classify_heading(line)
        if kind == HeadingKind.NONE:
            return None

        if kind == HeadingKind.SIMPLE:
            line_range = self._simple_range(i)

        elif kind == HeadingKind.GRID:
            line_range = self._range_to_blank(i, i + 1)

        else:
            line_range = self._pipe_range(i)

        if line_range is None:
            return None

        dialect = kind.dialect()
        assert dialect is not None
        return TableSpan(line_range, dialect)

    def _simple_range(self, i: int) -> LineRange | None:
        if is_blank(self._host.line(i + 1)):
            # Either the end of the document or a setext heading
            return None

        if not self._has_title(i):
            # Headerless, so the table is closed by a second rule
            for j in range(i + 1, self._host.line_count()):
                line = self._host.line(j)
                if is_blank(line):
                    return None

                assert line is not None
                if classify_heading(line) == HeadingKind.SIMPLE:
                    return LineRange(i, j)

            return None

        return self._range_to_blank(i - 1, i)

    def _pipe_range(self, i: int) -> LineRange | None:
        # A pipe table must have a header row above its separator
        if not self._has_title(i):
            return None

        return self._range_to_blank(i - 1, i)

    def _has_title(self, i: int) -> bool:
        """Return True if the line above a heading holds text."""
        return i > 0 and not is_blank(self._host.line(i - 1))

    def _range_to_blank(self, first: int, scan_from: int) -> LineRange | None:
        """
        Extend a span down to the line before the next blank line.

        The end of the document also ends the span.

        Args:
            first: First line of the span
            scan_from: Line to start looking for a blank line

        Returns:
            The span, or None if it would only be one line long
        """
        last = self._host.line_count() - 1
        for j in range(scan_from, self._host.line_count()):
            if is_blank(self._host.line(j)):
                last = j - 1
                break

        if last <= first:
            return None

        return LineRange(first, last)

    def _is_setext_heading(self, span: TableSpan) -> bool:
        """
        Check for a paragraph line underlined with dashes.

        Users often forget the blank line after a setext heading, which makes
        the heading and the following paragraph look like a one-column simple
        table.  Converting that would lose the paragraph's formatting.

        Args:
            span: A simple table span

        Returns:
            True if the span's second line is made only of dashes
        """
        second = self._host.line(span.line_range.first + 1)
        return len(span.line_range) >= 2 and second is not None and is_dash_rule(second)
