"""
In-place detection and rendering of Markdown tables.

This package finds simple, grid and pipe tables in an editor's visible lines,
converts them into structured tables shown in place of their text, and writes
edited tables back into the document.
"""

from mdtable.mdtable_binding import BindingState, TableBinding
from mdtable.mdtable_commands import EMPTY_TABLE, insert_table
from mdtable.mdtable_detector import TableSpanDetector
from mdtable.mdtable_exceptions import TableBindingError, TableError, TableParseError
from mdtable.mdtable_factory import TableFactory
from mdtable.mdtable_heading import HeadingKind, classify_heading
from mdtable.mdtable_host import TableHost
from mdtable.mdtable_instance import TableInstance, TableRenderConfig
from mdtable.mdtable_manager import TableConstructionFailure, TableInstanceManager, TableRenderResult
from mdtable.mdtable_mode_tracker import MarkdownModeTracker
from mdtable.mdtable_model import TableModel
from mdtable.mdtable_parser import TableParser
from mdtable.mdtable_registry import RegisteredTable, TableRegistry
from mdtable.mdtable_serializer import TableSerializer
from mdtable.mdtable_settings import TableSettings
from mdtable.mdtable_text_buffer import TextBuffer, TextMarker
from mdtable.mdtable_types import LineRange, TableAlignment, TableDialect, TableSpan, TextMode
from mdtable.mdtable_validator import SpanRejection, TableSpanValidator

__all__ = [
    # Exceptions
    'TableError',
    'TableParseError',
    'TableBindingError',
    # Types
    'LineRange',
    'TableAlignment',
    'TableDialect',
    'TableSpan',
    'TextMode',
    'HeadingKind',
    'SpanRejection',
    'BindingState',
    # Core classes
    'classify_heading',
    'MarkdownModeTracker',
    'TableHost',
    'TextBuffer',
    'TextMarker',
    'TableSpanDetector',
    'TableSpanValidator',
    'TableModel',
    'TableParser',
    'TableSerializer',
    'TableInstance',
    'TableRenderConfig',
    'TableFactory',
    'TableBinding',
    'RegisteredTable',
    'TableRegistry',
    'TableSettings',
    'TableConstructionFailure',
    'TableRenderResult',
    'TableInstanceManager',
    # Commands
    'EMPTY_TABLE',
    'insert_table',
]
