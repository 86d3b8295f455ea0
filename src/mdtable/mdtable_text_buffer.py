"""In-memory editor host."""

from dataclasses import dataclass
import logging
from typing import Any, Callable, List, Sequence, Tuple

from mdtable.mdtable_host import TableHost
from mdtable.mdtable_mode_tracker import MarkdownModeTracker
from mdtable.mdtable_types import LineRange, TextMode


@dataclass
class TextMarker:
    """
    A range marker held by a TextBuffer.

    Attributes:
        marker_id: Unique ID within the buffer
        first: First covered line
        last: Last covered line
        handle: Rendering handle shown in place of the lines
        cleared: True once the marker no longer covers any text
    """
    marker_id: int
    first: int
    last: int
    handle: Any
    cleared: bool = False


class TextBuffer(TableHost):
    """
    A line-based text document implementing the editor host interface.

    Markers are tracked at line granularity: an edit that touches any line a
    marker covers clears that marker, while whole lines inserted directly
    before or after it leave it in place.
    """

    def __init__(self, text: str = "") -> None:
        """
        Initialize the buffer.

        Args:
            text: Initial document text
        """
        self._logger = logging.getLogger("TextBuffer")
        self._lines: List[str] = text.split('\n')
        self._cursor: Tuple[int, int] = (0, 0)
        self._viewport: Tuple[int, int] | None = None
        self._markers: List[TextMarker] = []
        self._next_marker_id = 0
        self._mode_tracker = MarkdownModeTracker()
        self._modes_dirty = True
        self._change_listeners: List[Callable[[], None]] = []

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "TextBuffer":
        """Create a buffer holding the given lines."""
        return cls('\n'.join(lines))

    def text(self) -> str:
        """Get the whole document text."""
        return '\n'.join(self._lines)

    def lines(self) -> List[str]:
        """Get a copy of the document lines."""
        return self._lines.copy()

    def set_cursor(self, line: int, ch: int = 0) -> None:
        """
        Move the cursor.

        Args:
            line: Line index
            ch: Character offset within the line
        """
        line = max(0, min(line, len(self._lines) - 1))
        ch = max(0, min(ch, len(self._lines[line])))
        self._cursor = (line, ch)

    def cursor(self) -> Tuple[int, int]:
        """Get the cursor position as (line, ch)."""
        return self._cursor

    def set_viewport(self, start: int | None, stop: int | None = None) -> None:
        """
        Set the visible lines.

        Args:
            start: First visible line, or None to show the whole document
            stop: One past the last visible line
        """
        if start is None:
            self._viewport = None
            return

        self._viewport = (start, stop if stop is not None else len(self._lines))

    def add_change_listener(self, listener: Callable[[], None]) -> None:
        """
        Register a callback invoked after every change to the document text.

        Args:
            listener: Callable taking no arguments
        """
        self._change_listeners.append(listener)

    def markers(self) -> List[TextMarker]:
        """Get the live markers, in creation order."""
        return [m for m in self._markers if not m.cleared]

    def line_count(self) -> int:
        return len(self._lines)

    def line(self, index: int) -> str | None:
        if index < 0 or index >= len(self._lines):
            return None

        return self._lines[index]

    def mode_at(self, line: int, ch: int) -> TextMode:
        if self._modes_dirty:
            self._mode_tracker.update(self._lines)
            self._modes_dirty = False

        return self._mode_tracker.mode_at(line, ch)

    def viewport(self) -> Tuple[int, int]:
        if self._viewport is None:
            return 0, len(self._lines)

        start, stop = self._viewport
        return max(0, start), min(stop, len(self._lines))

    def cursor_line(self) -> int:
        return self._cursor[0]

    def replace_lines(self, line_range: LineRange, lines: Sequence[str]) -> None:
        if line_range.last >= len(self._lines):
            raise IndexError(f"Line range {line_range.first}-{line_range.last} is beyond the end of the document")

        delta = len(lines) - len(line_range)
        for marker in self.markers():
            if marker.last < line_range.first:
                continue

            if marker.first > line_range.last:
                marker.first += delta
                marker.last += delta
                continue

            self._clear(marker)

        self._lines[line_range.first:line_range.last + 1] = list(lines)
        if not self._lines:
            self._lines = ['']

        cursor_line, cursor_ch = self._cursor
        if cursor_line > line_range.last:
            self._cursor = (cursor_line + delta, cursor_ch)

        elif cursor_line >= line_range.first:
            self.set_cursor(min(cursor_line, line_range.first + len(lines) - 1) if lines else line_range.first)

        self._changed()

    def insert_lines(self, index: int, lines: Sequence[str]) -> None:
        """
        Insert whole lines before a line.

        Args:
            index: Index the first inserted line will have
            lines: Lines to insert
        """
        count = len(lines)
        for marker in self.markers():
            if marker.first >= index:
                marker.first += count
                marker.last += count

            elif marker.last >= index:
                self._clear(marker)

        self._lines[index:index] = list(lines)
        cursor_line, cursor_ch = self._cursor
        if cursor_line >= index:
            self._cursor = (cursor_line + count, cursor_ch)

        self._changed()

    def insert_at_cursor(self, text: str) -> None:
        line, ch = self._cursor
        current = self._lines[line]
        before = current[:ch]
        after = current[ch:]
        new_lines = (before + text + after).split('\n')
        inserted = text.split('\n')

        # Whole lines typed at the start of a line, or after the end of one,
        # are insertions at a marker edge rather than edits inside it.
        if ch == 0 and text.endswith('\n'):
            self.insert_lines(line, inserted[:-1])
            self._cursor = (line + len(inserted) - 1, 0)
            return

        if ch == len(current) and text.startswith('\n') and not after:
            self.insert_lines(line + 1, inserted[1:])
            self._cursor = (line + len(inserted) - 1, len(inserted[-1]))
            return

        self.replace_lines(LineRange(line, line), new_lines)
        self._cursor = (line + len(inserted) - 1, len(new_lines[len(inserted) - 1]) - len(after))

    def mark_lines(self, line_range: LineRange, handle: Any) -> TextMarker:
        marker = TextMarker(self._next_marker_id, line_range.first, line_range.last, handle)
        self._next_marker_id += 1
        self._markers.append(marker)
        return marker

    def find_markers(self, line_range: LineRange) -> List[TextMarker]:
        return [
            m for m in self.markers()
            if LineRange(m.first, m.last).overlaps(line_range)
        ]

    def marker_range(self, marker: Any) -> LineRange | None:
        if not isinstance(marker, TextMarker) or marker.cleared:
            return None

        return LineRange(marker.first, marker.last)

    def clear_marker(self, marker: Any) -> None:
        if isinstance(marker, TextMarker) and not marker.cleared:
            self._clear(marker)

    def _clear(self, marker: TextMarker) -> None:
        self._logger.debug("Clearing marker %d at lines %d-%d", marker.marker_id, marker.first, marker.last)
        marker.cleared = True
        self._markers.remove(marker)

    def _changed(self) -> None:
        self._modes_dirty = True
        for listener in list(self._change_listeners):
            listener()
