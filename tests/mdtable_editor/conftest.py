"""Shared fixtures for Qt table rendering tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Get the application instance, creating it if needed."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])

    return app


@pytest.fixture
def editor_with(qapp):
    """Factory for shown editors holding the given lines."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    editors = []

    def _create_editor(lines, cursor_line=None):
        editor = QtWidgets.QPlainTextEdit()
        editor.setPlainText('\n'.join(lines))
        editor.resize(600, 800)
        editor.show()
        qapp.processEvents()

        cursor = editor.textCursor()
        block = editor.document().findBlockByNumber(len(lines) - 1 if cursor_line is None else cursor_line)
        cursor.setPosition(block.position())
        editor.setTextCursor(cursor)
        editors.append(editor)
        return editor

    yield _create_editor

    for editor in editors:
        editor.close()
        editor.deleteLater()

    qapp.processEvents()


PIPE_TABLE = [
    "| Name | Value |",
    "| ---- | ----- |",
    "| a    | 1     |",
]


@pytest.fixture
def pipe_document():
    """Get a short document holding a pipe table at lines 2 to 4."""
    return ["Intro text", ""] + PIPE_TABLE + ["", "Closing text"]
