"""Structured table model."""

from typing import List, Sequence

from mdtable.mdtable_exceptions import TableError
from mdtable.mdtable_types import TableAlignment


class TableModel:
    """
    A rectangular grid of cell text with per-column alignment.

    When the table has a header, row 0 is the header row.  Every mutation
    marks the model as modified so that an untouched table can be written
    back exactly as it was read.
    """

    def __init__(
        self,
        rows: Sequence[Sequence[str]],
        alignments: Sequence[TableAlignment] | None = None,
        has_header: bool = True
    ) -> None:
        """
        Initialize the model, padding short rows with empty cells.

        Args:
            rows: Cell text by row
            alignments: Alignment by column
            has_header: Whether row 0 is a header row
        """
        alignments = list(alignments or [])
        column_count = max([len(alignments)] + [len(row) for row in rows] + [1])
        self._rows: List[List[str]] = [
            list(row) + [''] * (column_count - len(row)) for row in rows
        ]
        if not self._rows:
            self._rows = [[''] * column_count]

        self._alignments = alignments + [TableAlignment.DEFAULT] * (column_count - len(alignments))
        self._has_header = has_header
        self._modified = False

    def __repr__(self) -> str:
        return f"TableModel(rows={self._rows!r}, alignments={self._alignments!r}, has_header={self._has_header!r})"

    def has_header(self) -> bool:
        """Return True if row 0 is a header row."""
        return self._has_header

    def is_modified(self) -> bool:
        """Return True if the model has changed since it was created."""
        return self._modified

    def row_count(self) -> int:
        """Get the number of rows, including any header row."""
        return len(self._rows)

    def column_count(self) -> int:
        """Get the number of columns."""
        return len(self._alignments)

    def rows(self) -> List[List[str]]:
        """Get a copy of all rows, including any header row."""
        return [row.copy() for row in self._rows]

    def header(self) -> List[str] | None:
        """Get the header row, or None if the table has no header."""
        return self._rows[0].copy() if self._has_header else None

    def body(self) -> List[List[str]]:
        """Get the rows below the header."""
        return [row.copy() for row in self._rows[1 if self._has_header else 0:]]

    def cell(self, row: int, column: int) -> str:
        """Get the text of a cell."""
        return self._rows[row][column]

    def set_cell(self, row: int, column: int, text: str) -> None:
        """
        Set the text of a cell.

        Args:
            row: Row index, counting any header row
            column: Column index
            text: New cell text
        """
        if self._rows[row][column] == text:
            return

        self._rows[row][column] = text
        self._modified = True

    def alignments(self) -> List[TableAlignment]:
        """Get the alignment of every column."""
        return self._alignments.copy()

    def alignment(self, column: int) -> TableAlignment:
        """Get the alignment of a column."""
        return self._alignments[column]

    def set_alignment(self, column: int, alignment: TableAlignment) -> None:
        """Set the alignment of a column."""
        if self._alignments[column] == alignment:
            return

        self._alignments[column] = alignment
        self._modified = True

    def insert_row(self, index: int | None = None) -> int:
        """
        Insert an empty row.

        Args:
            index: Position of the new row, or None to append it

        Returns:
            Index of the new row
        """
        if index is None:
            index = len(self._rows)

        # Nothing can go above the header
        if self._has_header:
            index = max(index, 1)

        self._rows.insert(index, [''] * self.column_count())
        self._modified = True
        return index

    def remove_row(self, index: int) -> None:
        """
        Remove a row.

        Raises:
            TableError: If the row is the only row, or is the header row
        """
        if len(self._rows) <= 1:
            raise TableError("Cannot remove the only row of a table")

        if self._has_header and index == 0:
            raise TableError("Cannot remove the header row of a table")

        del self._rows[index]
        self._modified = True

    def insert_column(self, index: int | None = None, alignment: TableAlignment = TableAlignment.DEFAULT) -> int:
        """
        Insert an empty column.

        Args:
            index: Position of the new column, or None to append it
            alignment: Alignment of the new column

        Returns:
            Index of the new column
        """
        if index is None:
            index = self.column_count()

        for row in self._rows:
            row.insert(index, '')

        self._alignments.insert(index, alignment)
        self._modified = True
        return index

    def remove_column(self, index: int) -> None:
        """
        Remove a column.

        Raises:
            TableError: If the column is the only column
        """
        if self.column_count() <= 1:
            raise TableError("Cannot remove the only column of a table")

        for row in self._rows:
            del row[index]

        del self._alignments[index]
        self._modified = True
