"""Wiring between a QPlainTextEdit and the table instance manager."""

import logging

from PySide6.QtCore import QObject, QRect, QTimer, Signal
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from mdtable import TableInstanceManager, TableRegistry, TableRenderResult, TableSettings

from mdtable_editor.editor_table_factory import EditorTableFactory
from mdtable_editor.editor_table_host import EditorTableHost


class EditorTableController(QObject):
    """
    Renders the tables of a QPlainTextEdit as the user scrolls and types.

    Rendering passes are batched: any number of edits, cursor moves and
    scrolls within one turn of the event loop cause a single pass.
    """

    tables_rendered = Signal(object)

    def __init__(
        self,
        editor: QPlainTextEdit,
        settings: TableSettings | None = None,
        registry: TableRegistry | None = None
    ) -> None:
        """
        Initialize the controller.

        Args:
            editor: The editor showing the Markdown document
            settings: Rendering settings
            registry: Registry of rendered tables for this editing session
        """
        super().__init__(editor)
        self._logger = logging.getLogger("EditorTableController")
        self._editor = editor
        self._host = EditorTableHost(editor)
        self._manager = TableInstanceManager(
            self._host,
            EditorTableFactory(editor),
            settings,
            registry
        )

        self._render_timer = QTimer(self)
        self._render_timer.setSingleShot(True)
        self._render_timer.setInterval(0)
        self._render_timer.timeout.connect(self.render_tables)

        self._insert_table_action = QAction("Insert Table", editor)
        self._insert_table_action.setShortcut(QKeySequence("Ctrl+Alt+T"))
        self._insert_table_action.triggered.connect(self._manager.insert_table)
        editor.addAction(self._insert_table_action)

        editor.updateRequest.connect(self._on_update_request)
        editor.textChanged.connect(self.schedule_render)
        editor.cursorPositionChanged.connect(self._on_cursor_position_changed)

        self.schedule_render()

    def manager(self) -> TableInstanceManager:
        """Get the table instance manager."""
        return self._manager

    def host(self) -> EditorTableHost:
        """Get the editor host."""
        return self._host

    def insert_table_action(self) -> QAction:
        """Get the action that inserts an empty table."""
        return self._insert_table_action

    def schedule_render(self) -> None:
        """Request a rendering pass once control returns to the event loop."""
        self._render_timer.start()

    def render_tables(self) -> TableRenderResult:
        """
        Run a rendering pass now.

        Returns:
            The spans rendered and the tables that could not be converted
        """
        self._render_timer.stop()
        self._host.layout_markers()
        result = self._manager.render_tables()
        if result.rendered or result.failures:
            self._logger.debug("Rendered %d tables, %d failed", len(result.rendered), len(result.failures))
            self.tables_rendered.emit(result)

        return result

    def _on_update_request(self, _rect: QRect, dy: int) -> None:
        self._host.layout_markers()
        if dy:
            self.schedule_render()

    def _on_cursor_position_changed(self) -> None:
        # The cursor may have been moved onto a rendered table's text, in
        # which case the table itself takes over editing
        marker = self._host.marker_at_line(self._host.cursor_line())
        if marker is not None and isinstance(marker.handle, QWidget):
            marker.handle.setFocus()
            return

        self.schedule_render()

    def clear(self) -> None:
        """Remove every rendered table, leaving the document text as it is."""
        self._render_timer.stop()
        self._manager.clear()
