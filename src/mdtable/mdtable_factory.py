"""Construction of table instances from table text."""

from typing import Any

from mdtable.mdtable_instance import TableInstance, TableRenderConfig
from mdtable.mdtable_parser import TableParser
from mdtable.mdtable_serializer import TableSerializer
from mdtable.mdtable_types import TableDialect


class TableFactory:
    """
    Builds table instances.

    This factory is headless: its instances carry no rendering handle.
    Subclasses create a handle suited to their editor.
    """

    def __init__(self, parser: TableParser | None = None, serializer: TableSerializer | None = None) -> None:
        """
        Initialize the factory.

        Args:
            parser: Parser for table text
            serializer: Serializer for edited tables
        """
        self._parser = parser or TableParser()
        self._serializer = serializer or TableSerializer()

    def construct(self, text: str, dialect: TableDialect, config: TableRenderConfig) -> TableInstance:
        """
        Build a table instance.

        Args:
            text: Lines of the table joined with newlines
            dialect: Table dialect
            config: Render options

        Returns:
            The new instance

        Raises:
            TableParseError: If the text is not a well-formed table
        """
        model = self._parser.parse(text, dialect)
        instance = TableInstance(text, dialect, model, config, self._serializer)
        instance.handle = self._create_handle(instance, config)
        return instance

    def _create_handle(self, instance: TableInstance, config: TableRenderConfig) -> Any:
        """
        Create the rendering handle for an instance.

        Args:
            instance: The new instance
            config: Render options

        Returns:
            The rendering handle, or None
        """
        return None
