"""Qt-specific editor host for rendered tables."""

import logging
from typing import Any, List, Sequence, Tuple

from PySide6.QtCore import QPoint, QRect
from PySide6.QtGui import QTextCursor, QTextDocument
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from mdtable import LineRange, MarkdownModeTracker, TableHost, TextMode


class EditorTableMarker:
    """
    A range of a Qt text document covered by a rendering handle.

    The range is held by two text cursors so that Qt keeps it up to date as
    the document changes.  Text inserted at the start cursor pushes it along
    and text inserted at the end cursor leaves it in place, so neither edge
    grows to take in text typed next to it.
    """

    def __init__(self, document: QTextDocument, line_range: LineRange, handle: QWidget) -> None:
        """
        Initialize the marker.

        Args:
            document: Document holding the covered text
            line_range: Lines to cover
            handle: Widget displayed over the lines
        """
        first_block = document.findBlockByNumber(line_range.first)
        last_block = document.findBlockByNumber(line_range.last)

        self._document = document
        self._start = QTextCursor(document)
        self._start.setPosition(first_block.position())
        self._start.setKeepPositionOnInsert(False)
        self._end = QTextCursor(document)
        self._end.setPosition(last_block.position() + last_block.length() - 1)
        self._end.setKeepPositionOnInsert(True)
        self.handle = handle
        self.cleared = False

    def line_range(self) -> LineRange | None:
        """
        Get the lines the marker covers.

        Returns:
            The covered lines, or None if the marker has been cleared or its
            text has been deleted
        """
        if self.cleared:
            return None

        first = self._document.findBlock(self._start.position()).blockNumber()
        last = self._document.findBlock(self._end.position()).blockNumber()
        if last <= first:
            return None

        return LineRange(first, last)


class EditorTableHost(TableHost):
    """Editor host for a QPlainTextEdit."""

    def __init__(self, editor: QPlainTextEdit) -> None:
        """
        Initialize the host.

        Args:
            editor: The editor showing the Markdown document
        """
        self._logger = logging.getLogger("EditorTableHost")
        self._editor = editor
        self._markers: List[EditorTableMarker] = []
        self._mode_tracker = MarkdownModeTracker()
        self._mode_revision = -1

    def editor(self) -> QPlainTextEdit:
        """Get the editor widget."""
        return self._editor

    def _document(self) -> QTextDocument:
        return self._editor.document()

    def line_count(self) -> int:
        return self._document().blockCount()

    def line(self, index: int) -> str | None:
        if index < 0:
            return None

        block = self._document().findBlockByNumber(index)
        if not block.isValid():
            return None

        return block.text()

    def mode_at(self, line: int, ch: int) -> TextMode:
        document = self._document()
        if document.revision() != self._mode_revision:
            self._mode_tracker.update(document.toPlainText().split('\n'))
            self._mode_revision = document.revision()

        return self._mode_tracker.mode_at(line, ch)

    def viewport(self) -> Tuple[int, int]:
        viewport = self._editor.viewport()
        first = self._editor.cursorForPosition(QPoint(0, 0)).blockNumber()
        last = self._editor.cursorForPosition(QPoint(0, max(0, viewport.height() - 1))).blockNumber()
        return first, last + 1

    def cursor_line(self) -> int:
        cursor = self._editor.textCursor()
        return self._document().findBlock(cursor.selectionStart()).blockNumber()

    def replace_lines(self, line_range: LineRange, lines: Sequence[str]) -> None:
        document = self._document()
        first_block = document.findBlockByNumber(line_range.first)
        last_block = document.findBlockByNumber(line_range.last)
        if not first_block.isValid() or not last_block.isValid():
            raise IndexError(f"Line range {line_range.first}-{line_range.last} is beyond the end of the document")

        cursor = QTextCursor(document)
        cursor.beginEditBlock()
        cursor.setPosition(first_block.position())
        cursor.setPosition(last_block.position() + last_block.length() - 1, QTextCursor.MoveMode.KeepAnchor)
        cursor.insertText('\n'.join(lines))
        cursor.endEditBlock()

    def insert_at_cursor(self, text: str) -> None:
        self._editor.insertPlainText(text)

    def mark_lines(self, line_range: LineRange, handle: Any) -> EditorTableMarker:
        marker = EditorTableMarker(self._document(), line_range, handle)
        self._markers.append(marker)
        if isinstance(handle, QWidget):
            self._place_handle(marker)
            handle.show()

        return marker

    def find_markers(self, line_range: LineRange) -> List[EditorTableMarker]:
        result = []
        for marker in self._markers:
            marker_range = marker.line_range()
            if marker_range is not None and marker_range.overlaps(line_range):
                result.append(marker)

        return result

    def marker_range(self, marker: Any) -> LineRange | None:
        if not isinstance(marker, EditorTableMarker):
            return None

        return marker.line_range()

    def clear_marker(self, marker: Any) -> None:
        if not isinstance(marker, EditorTableMarker) or marker.cleared:
            return

        marker.cleared = True
        self._markers.remove(marker)
        if isinstance(marker.handle, QWidget):
            marker.handle.hide()
            marker.handle.deleteLater()

    def marker_at_line(self, line: int) -> EditorTableMarker | None:
        """
        Find the live marker covering a line.

        Args:
            line: Line index

        Returns:
            The marker, or None if the line is not covered
        """
        markers = self.find_markers(LineRange(line, line))
        return markers[0] if markers else None

    def layout_markers(self) -> None:
        """Move every rendering handle over the lines it covers."""
        for marker in list(self._markers):
            if marker.line_range() is None:
                self._logger.debug("Removing table widget: the text it covered has gone")
                self.clear_marker(marker)
                continue

            self._place_handle(marker)

    def _place_handle(self, marker: EditorTableMarker) -> None:
        handle = marker.handle
        line_range = marker.line_range()
        if not isinstance(handle, QWidget) or line_range is None:
            return

        document = self._document()
        top = self._editor.cursorRect(QTextCursor(document.findBlockByNumber(line_range.first))).top()
        bottom = self._editor.cursorRect(QTextCursor(document.findBlockByNumber(line_range.last))).bottom()
        viewport = self._editor.viewport()
        rect = QRect(0, top, viewport.width(), bottom - top + 1)

        parent = handle.parentWidget()
        if parent is not None and parent is not viewport:
            rect.moveTopLeft(parent.mapFromGlobal(viewport.mapToGlobal(rect.topLeft())))

        handle.setGeometry(rect)
