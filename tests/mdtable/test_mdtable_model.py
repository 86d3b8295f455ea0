"""Tests for the table model."""

import pytest

from mdtable.mdtable_exceptions import TableError
from mdtable.mdtable_model import TableModel
from mdtable.mdtable_types import TableAlignment


class TestTableModelConstruction:
    """Test building table models."""

    def test_rows_are_padded(self):
        """Test that short rows are padded to the widest row."""
        model = TableModel([["a", "b", "c"], ["d"]])

        assert model.column_count() == 3
        assert model.rows() == [["a", "b", "c"], ["d", "", ""]]
        assert model.alignments() == [TableAlignment.DEFAULT] * 3

    def test_alignments_widen_table(self):
        """Test that extra alignments add columns."""
        model = TableModel([["a"]], [TableAlignment.LEFT, TableAlignment.RIGHT])

        assert model.rows() == [["a", ""]]

    def test_empty_table_has_one_cell(self):
        """Test that an empty model still has one cell."""
        model = TableModel([])

        assert model.row_count() == 1
        assert model.column_count() == 1
        assert model.cell(0, 0) == ""

    def test_header_and_body(self):
        """Test splitting header from body rows."""
        model = TableModel([["h"], ["a"], ["b"]])

        assert model.header() == ["h"]
        assert model.body() == [["a"], ["b"]]

    def test_headerless(self):
        """Test a model with no header row."""
        model = TableModel([["a"], ["b"]], has_header=False)

        assert model.header() is None
        assert model.body() == [["a"], ["b"]]

    def test_rows_are_copies(self):
        """Test that returned rows cannot change the model."""
        model = TableModel([["a"]])
        model.rows()[0][0] = "x"

        assert model.cell(0, 0) == "a"


class TestTableModelEditing:
    """Test editing table models."""

    def test_set_cell_marks_modified(self):
        """Test that changing a cell marks the model modified."""
        model = TableModel([["a", "b"]])
        model.set_cell(0, 1, "c")

        assert model.cell(0, 1) == "c"
        assert model.is_modified()

    def test_set_same_cell_text(self):
        """Test that writing the same text does not mark the model modified."""
        model = TableModel([["a", "b"]])
        model.set_cell(0, 1, "b")

        assert not model.is_modified()

    def test_set_alignment(self):
        """Test changing a column alignment."""
        model = TableModel([["a", "b"]])
        model.set_alignment(1, TableAlignment.CENTER)

        assert model.alignment(1) == TableAlignment.CENTER
        assert model.is_modified()

    def test_insert_row(self):
        """Test inserting rows."""
        model = TableModel([["h"], ["a"]])

        assert model.insert_row() == 2
        assert model.insert_row(0) == 1
        assert model.rows() == [["h"], [""], ["a"], [""]]
        assert model.is_modified()

    def test_insert_row_headerless(self):
        """Test that a headerless table can gain a first row."""
        model = TableModel([["a"]], has_header=False)

        assert model.insert_row(0) == 0
        assert model.rows() == [[""], ["a"]]

    def test_remove_row(self):
        """Test removing a body row."""
        model = TableModel([["h"], ["a"], ["b"]])
        model.remove_row(1)

        assert model.rows() == [["h"], ["b"]]

    def test_remove_header_row(self):
        """Test that the header row cannot be removed."""
        model = TableModel([["h"], ["a"]])

        with pytest.raises(TableError):
            model.remove_row(0)

    def test_remove_only_row(self):
        """Test that the only row cannot be removed."""
        model = TableModel([["a"]], has_header=False)

        with pytest.raises(TableError):
            model.remove_row(0)

    def test_insert_column(self):
        """Test inserting a column."""
        model = TableModel([["a", "b"], ["c", "d"]])

        assert model.insert_column(1, TableAlignment.RIGHT) == 1
        assert model.rows() == [["a", "", "b"], ["c", "", "d"]]
        assert model.alignments()[1] == TableAlignment.RIGHT

    def test_remove_column(self):
        """Test removing a column."""
        model = TableModel([["a", "b"], ["c", "d"]], [TableAlignment.LEFT, TableAlignment.RIGHT])
        model.remove_column(0)

        assert model.rows() == [["b"], ["d"]]
        assert model.alignments() == [TableAlignment.RIGHT]

    def test_remove_only_column(self):
        """Test that the only column cannot be removed."""
        model = TableModel([["a"]])

        with pytest.raises(TableError):
            model.remove_column(0)
