"""Tests for table span detection."""

from mdtable.mdtable_detector import TableSpanDetector
from mdtable.mdtable_types import LineRange, TableDialect, TableSpan


def detect_all(buffer):
    """Detect every span in a buffer."""
    return list(TableSpanDetector(buffer).detect((0, buffer.line_count())))


class TestPipeDetection:
    """Test detection of pipe tables."""

    def test_pipe_table(self, buffer_from):
        """Test detecting a pipe table that fills the document."""
        buffer = buffer_from(["| A | B |", "| - | - |", "| 1 | 2 |"])

        assert detect_all(buffer) == [TableSpan(LineRange(0, 2), TableDialect.PIPE)]

    def test_pipe_table_ends_at_blank_line(self, buffer_from, helpers):
        """Test that a pipe table stops at the next blank line."""
        buffer = buffer_from(helpers.surround(helpers.PIPE_TABLE))

        assert detect_all(buffer) == [TableSpan(LineRange(2, 4), TableDialect.PIPE)]

    def test_pipe_separator_without_header(self, buffer_from):
        """Test that a separator row with nothing above it is not a table."""
        buffer = buffer_from(["", "| - | - |", "| 1 | 2 |"])

        assert detect_all(buffer) == []

    def test_header_and_separator_only(self, buffer_from):
        """Test a pipe table with no body rows."""
        buffer = buffer_from(["| A | B |", "| - | - |", "", "text"])

        assert detect_all(buffer) == [TableSpan(LineRange(0, 1), TableDialect.PIPE)]

    def test_separator_with_trailing_space(self, buffer_from):
        """Test that trailing whitespace after a separator row is ignored."""
        buffer = buffer_from(["| A | B |", "| - | - | ", "| 1 | 2 |", "", "x"])

        assert detect_all(buffer) == [TableSpan(LineRange(0, 2), TableDialect.PIPE)]


class TestGridDetection:
    """Test detection of grid tables."""

    def test_grid_table(self, buffer_from, helpers):
        """Test detecting a grid table."""
        buffer = buffer_from(helpers.surround(helpers.GRID_TABLE))

        assert detect_all(buffer) == [TableSpan(LineRange(2, 6), TableDialect.GRID)]

    def test_top_rule_with_trailing_space(self, buffer_from, helpers):
        """Test that a grid table starts at a top rule followed by trailing whitespace."""
        table = [helpers.GRID_TABLE[0] + " "] + helpers.GRID_TABLE[1:]
        buffer = buffer_from(table + ["", "x"])

        assert detect_all(buffer) == [TableSpan(LineRange(0, 4), TableDialect.GRID)]

    def test_lone_grid_rule(self, buffer_from):
        """Test that a grid rule followed by a blank line is not a table."""
        buffer = buffer_from(["+---+", "", "text"])

        assert detect_all(buffer) == []


class TestSimpleDetection:
    """Test detection of simple tables."""

    def test_simple_table_with_header(self, buffer_from, helpers):
        """Test detecting a simple table that has a header row."""
        buffer = buffer_from(helpers.surround(helpers.SIMPLE_TABLE))

        assert detect_all(buffer) == [TableSpan(LineRange(2, 5), TableDialect.SIMPLE)]

    def test_headerless_simple_table(self, buffer_from, helpers):
        """Test detecting a simple table framed by two rules."""
        buffer = buffer_from(helpers.surround(helpers.HEADERLESS_SIMPLE_TABLE))

        assert detect_all(buffer) == [TableSpan(LineRange(2, 5), TableDialect.SIMPLE)]

    def test_unclosed_headerless_table(self, buffer_from):
        """Test that a headerless table needs a closing rule."""
        buffer = buffer_from(["", "---  ---", "a    b", "", "text"])

        assert detect_all(buffer) == []

    def test_setext_heading_is_not_a_table(self, buffer_from):
        """Test that a setext heading followed by a paragraph is ignored."""
        buffer = buffer_from(["Title", "-----", "next paragraph text"])

        assert detect_all(buffer) == []

    def test_setext_heading_before_blank_line(self, buffer_from):
        """Test that a properly separated setext heading is ignored."""
        buffer = buffer_from(["Title", "-----", "", "text"])

        assert detect_all(buffer) == []

    def test_thematic_break(self, buffer_from):
        """Test that a horizontal rule between paragraphs is not a table."""
        buffer = buffer_from(["text", "", "---", "", "more"])

        assert detect_all(buffer) == []


class TestDetectionScope:
    """Test the lines the detector looks at."""

    def test_code_block_is_skipped(self, buffer_from):
        """Test that tables inside fenced code are not detected."""
        buffer = buffer_from(["```", "| A | B |", "| - | - |", "| 1 | 2 |", "```"])

        assert detect_all(buffer) == []

    def test_frontmatter_closing_rule_is_skipped(self, buffer_from):
        """Test that the frontmatter closing delimiter is not a simple table heading."""
        buffer = buffer_from(["---", "title: x", "---", "text"])

        assert detect_all(buffer) == []

    def test_multiple_tables(self, buffer_from, helpers):
        """Test detecting several tables in document order."""
        lines = helpers.PIPE_TABLE + [""] + helpers.GRID_TABLE
        buffer = buffer_from(lines)

        assert detect_all(buffer) == [
            TableSpan(LineRange(0, 2), TableDialect.PIPE),
            TableSpan(LineRange(4, 8), TableDialect.GRID),
        ]

    def test_heading_must_be_in_range(self, buffer_from, helpers):
        """Test that only headings inside the scanned range are considered."""
        buffer = buffer_from(helpers.surround(helpers.PIPE_TABLE))
        detector = TableSpanDetector(buffer)

        assert list(detector.detect((0, 3))) == []
        assert list(detector.detect((3, 4))) == [TableSpan(LineRange(2, 4), TableDialect.PIPE)]

    def test_rows_inside_span_are_not_rescanned(self, buffer_from):
        """Test that a separator-like body row does not start a second table."""
        buffer = buffer_from(["| A | B |", "| - | - |", "| - | - |", "| 1 | 2 |"])

        assert detect_all(buffer) == [TableSpan(LineRange(0, 3), TableDialect.PIPE)]
