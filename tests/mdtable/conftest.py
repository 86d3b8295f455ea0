"""Shared fixtures and utilities for table tests."""

from typing import Any, List

import pytest

from mdtable.mdtable_factory import TableFactory
from mdtable.mdtable_instance import TableInstance, TableRenderConfig
from mdtable.mdtable_manager import TableInstanceManager
from mdtable.mdtable_parser import TableParser
from mdtable.mdtable_serializer import TableSerializer
from mdtable.mdtable_settings import TableSettings
from mdtable.mdtable_text_buffer import TextBuffer
from mdtable.mdtable_types import TableDialect


class RecordingHandle:
    """Rendering handle that records the instance it displays."""

    def __init__(self, instance: TableInstance) -> None:
        self.instance = instance

    def blur(self) -> None:
        """Simulate editing focus leaving the rendered table."""
        self.instance.notify_blur()


class RecordingTableFactory(TableFactory):
    """Table factory that creates RecordingHandles and remembers every instance."""

    def __init__(self) -> None:
        super().__init__()
        self.instances: List[TableInstance] = []

    def _create_handle(self, instance: TableInstance, config: TableRenderConfig) -> Any:
        self.instances.append(instance)
        return RecordingHandle(instance)


@pytest.fixture
def parser():
    """Create a table parser."""
    return TableParser()


@pytest.fixture
def serializer():
    """Create a table serializer."""
    return TableSerializer()


@pytest.fixture
def buffer_from():
    """Factory for text buffers with the cursor parked on a given line."""
    def _create_buffer(lines: List[str], cursor_line: int | None = None) -> TextBuffer:
        buffer = TextBuffer.from_lines(lines)
        buffer.set_cursor(len(lines) - 1 if cursor_line is None else cursor_line)
        return buffer
    return _create_buffer


@pytest.fixture
def manager_for():
    """Factory for table managers over a text buffer using a RecordingTableFactory."""
    def _create_manager(buffer: TextBuffer, settings: TableSettings | None = None) -> TableInstanceManager:
        return TableInstanceManager(buffer, RecordingTableFactory(), settings)
    return _create_manager


@pytest.fixture
def render_config():
    """Create render options whose blur callback records the instances it sees."""
    blurred: List[TableInstance] = []
    config = TableRenderConfig(container="#editor", on_blur=blurred.append)
    return config, blurred


class TableTestHelpers:
    """Helper utilities for table testing."""

    PIPE_TABLE = [
        "| Name | Value |",
        "| ---- | ----- |",
        "| a    | 1     |",
    ]

    GRID_TABLE = [
        "+------+-------+",
        "| Name | Value |",
        "+======+=======+",
        "| a    | 1     |",
        "+------+-------+",
    ]

    SIMPLE_TABLE = [
        "Name  Value",
        "----  -----",
        "a     1",
        "b     2",
    ]

    HEADERLESS_SIMPLE_TABLE = [
        "----  -----",
        "a     1",
        "b     2",
        "----  -----",
    ]

    @staticmethod
    def tables() -> List[tuple]:
        """Get one sample table of each dialect."""
        return [
            (TableDialect.PIPE, TableTestHelpers.PIPE_TABLE),
            (TableDialect.GRID, TableTestHelpers.GRID_TABLE),
            (TableDialect.SIMPLE, TableTestHelpers.SIMPLE_TABLE),
            (TableDialect.SIMPLE, TableTestHelpers.HEADERLESS_SIMPLE_TABLE),
        ]

    @staticmethod
    def surround(table: List[str]) -> List[str]:
        """Put a paragraph before a table and after it, separated by blank lines."""
        return ["Intro text", ""] + table + ["", "Closing text"]


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return TableTestHelpers
