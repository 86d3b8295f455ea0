"""Qt-specific table factory."""

import logging

from PySide6.QtWidgets import QPlainTextEdit, QWidget

from mdtable import TableFactory, TableInstance, TableParser, TableRenderConfig, TableSerializer

from mdtable_editor.editor_table_widget import EditorTableWidget


class EditorTableFactory(TableFactory):
    """Builds table instances rendered as EditorTableWidgets over a QPlainTextEdit."""

    def __init__(
        self,
        editor: QPlainTextEdit,
        parser: TableParser | None = None,
        serializer: TableSerializer | None = None
    ) -> None:
        """
        Initialize the factory.

        Args:
            editor: The editor the tables are rendered in
            parser: Parser for table text
            serializer: Serializer for edited tables
        """
        super().__init__(parser, serializer)
        self._logger = logging.getLogger("EditorTableFactory")
        self._editor = editor

    def container(self, selector: str) -> QWidget:
        """
        Find the widget rendered tables are placed in.

        The last part of the selector names the widget (its object name, with
        any leading '#' or '.' removed).  Naming the editor itself, or naming no
        child of the editor, puts the tables in the editor's viewport.

        Args:
            selector: Container selector from the render options

        Returns:
            The container widget
        """
        parts = selector.split()
        if parts:
            name = parts[-1].lstrip('#.')
            if name == self._editor.objectName():
                return self._editor.viewport()

            widget = self._editor.findChild(QWidget, name)
            if widget is not None:
                return widget

        self._logger.debug("No container '%s', using the editor viewport", selector)
        return self._editor.viewport()

    def _create_handle(self, instance: TableInstance, config: TableRenderConfig) -> EditorTableWidget:
        return EditorTableWidget(instance, self.container(config.container))
