"""Table widget shown in place of a Markdown table's text."""

import logging
from typing import Dict

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QAction, QFont
from PySide6.QtWidgets import QApplication, QTableWidget, QTableWidgetItem, QWidget

from mdtable import TableAlignment, TableError, TableInstance


class EditorTableWidget(QTableWidget):
    """
    Editable grid for one table instance.

    Cell edits go straight into the instance's model.  Once editing focus
    has left the widget and all of its children, the instance is told so
    that the table can be written back into the document.
    """

    editing_finished = Signal(object)

    _ALIGNMENTS: Dict[TableAlignment, Qt.AlignmentFlag] = {
        TableAlignment.DEFAULT: Qt.AlignmentFlag.AlignLeft,
        TableAlignment.LEFT: Qt.AlignmentFlag.AlignLeft,
        TableAlignment.CENTER: Qt.AlignmentFlag.AlignHCenter,
        TableAlignment.RIGHT: Qt.AlignmentFlag.AlignRight,
    }

    def __init__(self, instance: TableInstance, parent: QWidget | None = None) -> None:
        """
        Initialize the table widget.

        Args:
            instance: Table instance to display
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._logger = logging.getLogger("EditorTableWidget")
        self._instance = instance
        self._populating = False
        self._released = False

        self.setMouseTracking(True)
        self.setAutoFillBackground(True)
        self.horizontalHeader().hide()
        self.verticalHeader().hide()
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        app = QApplication.instance()
        if isinstance(app, QApplication):
            app.focusChanged.connect(self._on_focus_changed)

        self._add_actions()
        self._populate()
        self.itemChanged.connect(self._on_item_changed)

    def instance(self) -> TableInstance:
        """Get the table instance shown by this widget."""
        return self._instance

    def _add_actions(self) -> None:
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.ActionsContextMenu)
        for text, slot in (
            ("Insert Row Below", self._insert_row),
            ("Insert Column Right", self._insert_column),
            ("Remove Row", self._remove_row),
            ("Remove Column", self._remove_column),
        ):
            action = QAction(text, self)
            action.triggered.connect(slot)
            self.addAction(action)

    def _populate(self) -> None:
        """Fill the grid from the table model."""
        model = self._instance.model()
        self._populating = True
        self.setRowCount(model.row_count())
        self.setColumnCount(model.column_count())

        header_font = QFont(self.font())
        header_font.setBold(True)

        for row in range(model.row_count()):
            for column in range(model.column_count()):
                item = QTableWidgetItem(model.cell(row, column))
                item.setTextAlignment(self._ALIGNMENTS[model.alignment(column)] | Qt.AlignmentFlag.AlignVCenter)
                if row == 0 and model.has_header():
                    item.setFont(header_font)

                self.setItem(row, column, item)

        self.resizeColumnsToContents()
        self._populating = False

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if self._populating:
            return

        self._instance.model().set_cell(item.row(), item.column(), item.text())

    def _insert_row(self) -> None:
        row = self.currentRow()
        self._instance.model().insert_row(None if row < 0 else row + 1)
        self._populate()

    def _insert_column(self) -> None:
        column = self.currentColumn()
        self._instance.model().insert_column(None if column < 0 else column + 1)
        self._populate()

    def _remove_row(self) -> None:
        try:
            self._instance.model().remove_row(max(self.currentRow(), 0))

        except TableError as e:
            self._logger.debug("Cannot remove row: %s", str(e))
            return

        self._populate()

    def _remove_column(self) -> None:
        try:
            self._instance.model().remove_column(max(self.currentColumn(), 0))

        except TableError as e:
            self._logger.debug("Cannot remove column: %s", str(e))
            return

        self._populate()

    def _on_focus_changed(self, old: QWidget | None, _new: QWidget | None) -> None:
        if old is None or (old is not self and not self.isAncestorOf(old)):
            return

        # Focus moves between the table and its cell editors, so wait until
        # it has settled before deciding whether it has left us entirely.
        QTimer.singleShot(0, self._check_focus)

    def _check_focus(self) -> None:
        if self._released:
            return

        focus_widget = QApplication.focusWidget()
        if focus_widget is not None and (focus_widget is self or self.isAncestorOf(focus_widget)):
            return

        self._released = True
        self.editing_finished.emit(self._instance)
        self._instance.notify_blur()
