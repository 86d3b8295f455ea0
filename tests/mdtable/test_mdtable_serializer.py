"""Tests for table serialization."""

import pytest

from mdtable.mdtable_model import TableModel
from mdtable.mdtable_types import TableAlignment, TableDialect


class TestSerializeUnchangedLayout:
    """Test that tidy tables serialize to the same text they were read from."""

    def test_pipe_layout(self, parser, serializer, helpers):
        """Test a padded pipe table."""
        text = '\n'.join(helpers.PIPE_TABLE)
        model = parser.parse(text, TableDialect.PIPE)

        assert serializer.serialize(model, TableDialect.PIPE) == text + '\n'

    def test_grid_layout(self, parser, serializer, helpers):
        """Test a padded grid table."""
        text = '\n'.join(helpers.GRID_TABLE)
        model = parser.parse(text, TableDialect.GRID)

        assert serializer.serialize(model, TableDialect.GRID) == text + '\n'

    def test_simple_layout(self, parser, serializer, helpers):
        """Test a padded simple table."""
        text = '\n'.join(helpers.SIMPLE_TABLE)
        model = parser.parse(text, TableDialect.SIMPLE)

        assert serializer.serialize(model, TableDialect.SIMPLE) == text + '\n'


class TestSerializeEditedTables:
    """Test that edited tables read back as the same table."""

    @pytest.mark.parametrize("index", range(4))
    def test_edit_reads_back(self, parser, serializer, helpers, index):
        """Test editing a cell and re-reading the serialized table."""
        dialect, lines = helpers.tables()[index]
        model = parser.parse('\n'.join(lines), dialect)
        row = model.row_count() - 1
        model.set_cell(row, 1, "changed")

        output = serializer.serialize(model, dialect)
        assert output.endswith('\n')
        assert not output.endswith('\n\n')

        reparsed = parser.parse(output[:-1], dialect)
        assert reparsed.rows() == model.rows()
        assert reparsed.has_header() == model.has_header()

    @pytest.mark.parametrize("dialect", list(TableDialect))
    def test_alignments_read_back(self, parser, serializer, dialect):
        """Test that explicit alignments survive serialization."""
        alignments = [TableAlignment.LEFT, TableAlignment.RIGHT, TableAlignment.CENTER]
        model = TableModel([["ab", "cd", "ef"], ["1", "2", "3"]], alignments)

        output = serializer.serialize(model, dialect)
        reparsed = parser.parse(output[:-1], dialect)

        assert reparsed.alignments() == alignments
        assert reparsed.rows() == model.rows()


class TestSerializePipe:
    """Test pipe table output."""

    def test_escapes_pipes(self, parser, serializer):
        """Test that pipes inside cells are escaped."""
        model = TableModel([["a", "b"], ["x|y", "z"]])

        output = serializer.serialize(model, TableDialect.PIPE)

        assert "x\\|y" in output
        assert parser.parse(output[:-1], TableDialect.PIPE).cell(1, 0) == "x|y"

    def test_joins_multiline_cells(self, serializer):
        """Test that a multi-line cell is written on one line."""
        model = TableModel([["a"], ["one\ntwo"]])

        lines = serializer.serialize(model, TableDialect.PIPE).split('\n')

        assert lines[2] == "| one two |"

    def test_headerless_model_gets_empty_header(self, serializer):
        """Test that a table without a header is written with an empty header row."""
        model = TableModel([["a", "b"]], has_header=False)

        lines = serializer.serialize(model, TableDialect.PIPE).split('\n')

        assert lines[0] == "|     |     |"
        assert lines[1] == "| --- | --- |"
        assert lines[2] == "| a   | b   |"


class TestSerializeGrid:
    """Test grid table output."""

    def test_multiline_cells(self, parser, serializer):
        """Test that a multi-line cell spans several text lines."""
        model = TableModel([["one\ntwo", "x"]], has_header=False)

        output = serializer.serialize(model, TableDialect.GRID)

        assert output.split('\n')[:4] == [
            "+-----+-----+",
            "| one | x   |",
            "| two |     |",
            "+-----+-----+",
        ]
        assert parser.parse(output[:-1], TableDialect.GRID).rows() == [["one\ntwo", "x"]]


class TestSerializeSimple:
    """Test simple table output."""

    def test_headerless_is_framed(self, serializer):
        """Test that a table without a header has rules above and below."""
        model = TableModel([["a", "1"], ["b", "2"]], [TableAlignment.LEFT, TableAlignment.LEFT], has_header=False)

        lines = serializer.serialize(model, TableDialect.SIMPLE)[:-1].split('\n')

        assert lines == ["--  --", "a   1", "b   2", "--  --"]

    def test_empty_rows_are_skipped(self, serializer):
        """Test that an empty body row is not written as a blank line."""
        model = TableModel([["h1", "h2"], ["", ""], ["x", "y"]])

        lines = serializer.serialize(model, TableDialect.SIMPLE)[:-1].split('\n')

        assert lines == ["h1  h2", "--  --", "x   y"]

    def test_default_column_wider_than_title(self, parser, serializer):
        """Test that a default column stays default when a cell is wider than its title."""
        model = TableModel([["A", "B"], ["long cell", "x"]])

        output = serializer.serialize(model, TableDialect.SIMPLE)
        reparsed = parser.parse(output[:-1], TableDialect.SIMPLE)

        assert output[:-1].split('\n') == ["A          B", "-          -", "long cell  x"]
        assert reparsed.alignments() == [TableAlignment.DEFAULT, TableAlignment.DEFAULT]
        assert reparsed.rows() == model.rows()

    def test_empty_header_is_written_headerless(self, parser, serializer):
        """Test that a header with no text is dropped rather than written as a blank line."""
        model = TableModel([["", ""], ["a", "1"], ["b", "2"]])

        output = serializer.serialize(model, TableDialect.SIMPLE)
        reparsed = parser.parse(output[:-1], TableDialect.SIMPLE)

        assert output[:-1].split('\n') == ["-  -", "a  1", "b  2", "-  -"]
        assert not reparsed.has_header()
        assert reparsed.rows() == [["a", "1"], ["b", "2"]]

    def test_empty_first_row_of_headerless_table(self, serializer):
        """Test that a headerless table whose first row is empty does not start with a blank line."""
        model = TableModel([["", ""], ["a", "1"]], has_header=False)

        lines = serializer.serialize(model, TableDialect.SIMPLE)[:-1].split('\n')

        assert lines == ["-  -", "a  1", "-  -"]

    def test_table_without_text_is_written_as_pipe(self, parser, serializer):
        """Test that a table with no text at all keeps a form that reads back as a table."""
        model = TableModel([["", ""], ["", ""]])

        output = serializer.serialize(model, TableDialect.SIMPLE)

        assert output[:-1].split('\n')[1] == "| --- | --- |"
        assert parser.parse(output[:-1], TableDialect.PIPE).rows() == model.rows()
