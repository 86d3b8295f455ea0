"""Main entry point for the Markdown table editor."""

import json
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from types import TracebackType

from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QApplication, QPlainTextEdit

from mdtable import TableSettings

from mdtable_editor.editor_table_controller import EditorTableController


def setup_logging() -> None:
    """Log to a rotating file under the user's mdtable directory."""
    log_dir = os.path.expanduser("~/.mdtable/logs")
    os.makedirs(log_dir, exist_ok=True)

    # Keep up to 5 log files, max 1MB each
    handler = RotatingFileHandler(
        os.path.join(log_dir, "mdtable-editor.log"),
        maxBytes=1024*1024,
        backupCount=4,
        encoding='utf-8'
    )

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )


def install_global_exception_handler() -> None:
    """Log uncaught exceptions before the demo exits."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        if not issubclass(exc_type, KeyboardInterrupt):
            logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    sys.excepthook = handle_exception


def load_settings() -> TableSettings:
    """Load the user's table settings, falling back to the defaults."""
    path = os.path.expanduser("~/.mdtable/settings.json")
    if not os.path.exists(path):
        return TableSettings.create_default()

    try:
        return TableSettings.load(path)

    except (OSError, json.JSONDecodeError) as e:
        logging.getLogger("main").warning("Failed to load settings from %s: %s", path, str(e))
        return TableSettings.create_default()


def main() -> int:
    """Main function to run the application."""
    setup_logging()
    install_global_exception_handler()

    app = QApplication(sys.argv)

    editor = QPlainTextEdit()
    editor.setObjectName("editor")
    editor.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
    editor.resize(900, 700)

    if len(sys.argv) > 1:
        path = sys.argv[1]
        with open(path, 'r', encoding='utf-8') as f:
            editor.setPlainText(f.read())

        editor.setWindowTitle(os.path.basename(path))

    else:
        editor.setWindowTitle("Untitled")

    controller = EditorTableController(editor, load_settings())
    controller.schedule_render()

    editor.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
