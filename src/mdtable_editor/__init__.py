"""Qt rendering of Markdown tables in a QPlainTextEdit."""

from mdtable_editor.editor_table_controller import EditorTableController
from mdtable_editor.editor_table_factory import EditorTableFactory
from mdtable_editor.editor_table_host import EditorTableHost, EditorTableMarker
from mdtable_editor.editor_table_widget import EditorTableWidget

__all__ = [
    'EditorTableController',
    'EditorTableFactory',
    'EditorTableHost',
    'EditorTableMarker',
    'EditorTableWidget',
]
