"""Abstract editor host consumed by table detection and rendering."""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple

from mdtable.mdtable_types import LineRange, TextMode


class TableHost(ABC):
    """
    Abstract base class for the text editor that hosts rendered tables.

    A host owns the document lines, the cursor, the viewport and the range
    markers that substitute a rendering handle for a run of lines.  Markers
    are opaque to the table code: it only creates them, asks where they
    currently are, and clears them.
    """

    @abstractmethod
    def line_count(self) -> int:
        """
        Get the number of lines in the document.

        Returns:
            Number of lines
        """

    @abstractmethod
    def line(self, index: int) -> str | None:
        """
        Get the text of a line.

        Args:
            index: Line index (0-indexed)

        Returns:
            The line text without a terminator, or None if the index is out of range
        """

    @abstractmethod
    def mode_at(self, line: int, ch: int) -> TextMode:
        """
        Get the syntax mode at a position.

        Args:
            line: Line index (0-indexed)
            ch: Character offset within the line

        Returns:
            The syntax mode at the position
        """

    @abstractmethod
    def viewport(self) -> Tuple[int, int]:
        """
        Get the lines currently visible.

        Returns:
            Half-open range (start, stop) of visible line indices
        """

    @abstractmethod
    def cursor_line(self) -> int:
        """
        Get the line holding the start of the primary cursor or selection.

        Returns:
            Line index (0-indexed)
        """

    @abstractmethod
    def replace_lines(self, line_range: LineRange, lines: Sequence[str]) -> None:
        """
        Replace a range of lines with new lines.

        Args:
            line_range: Lines to replace
            lines: Replacement lines, without terminators
        """

    @abstractmethod
    def insert_at_cursor(self, text: str) -> None:
        """
        Insert text at the cursor, replacing any selection.

        Args:
            text: Text to insert, may contain newlines
        """

    @abstractmethod
    def mark_lines(self, line_range: LineRange, handle: Any) -> Any:
        """
        Replace the display of a range of lines with a rendering handle.

        The marker must survive edits elsewhere in the document, and text typed
        exactly at either edge must not become part of it.

        Args:
            line_range: Lines to cover
            handle: Rendering handle displayed in place of the lines

        Returns:
            An opaque marker
        """

    @abstractmethod
    def find_markers(self, line_range: LineRange) -> List[Any]:
        """
        Find live markers that overlap a range of lines.

        Args:
            line_range: Lines to search

        Returns:
            Markers overlapping the range
        """

    @abstractmethod
    def marker_range(self, marker: Any) -> LineRange | None:
        """
        Find where a marker currently is.

        Args:
            marker: Marker returned by mark_lines

        Returns:
            The lines the marker covers, or None if it has been cleared
        """

    @abstractmethod
    def clear_marker(self, marker: Any) -> None:
        """
        Clear a marker and stop displaying its rendering handle.

        Clearing a marker that is already cleared does nothing.

        Args:
            marker: Marker returned by mark_lines
        """

    def line_text(self, line_range: LineRange) -> str:
        """
        Get the text of a range of lines.

        Args:
            line_range: Lines to read

        Returns:
            The lines joined with newlines
        """
        return '\n'.join(self.line(i) or '' for i in line_range)
