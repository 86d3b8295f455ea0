"""Rendered table instances."""

from dataclasses import dataclass
from typing import Any, Callable
import uuid

from mdtable.mdtable_model import TableModel
from mdtable.mdtable_serializer import TableSerializer
from mdtable.mdtable_types import TableDialect


@dataclass
class TableRenderConfig:
    """
    Options handed to the table constructor.

    Attributes:
        container: Selector naming the element under which pointer and
            scroll tracking for the rendered table is scoped
        on_blur: Called with the instance when editing focus leaves the
            rendered table
    """
    container: str
    on_blur: Callable[["TableInstance"], None]


class TableInstance:
    """
    A table converted from document text and shown in place of that text.

    The instance owns the structured model and the rendering handle.  The
    rendering layer reports loss of editing focus through `notify_blur`,
    which forwards to the configured `on_blur` callback.
    """

    def __init__(
        self,
        source: str,
        dialect: TableDialect,
        model: TableModel,
        config: TableRenderConfig,
        serializer: TableSerializer | None = None
    ) -> None:
        """
        Initialize the instance.

        Args:
            source: Table text the instance was built from
            dialect: Dialect of the table
            model: Parsed table
            config: Render options
            serializer: Serializer used once the table has been edited
        """
        self.instance_id = str(uuid.uuid4())
        self.handle: Any = None
        self._source = source
        self._dialect = dialect
        self._model = model
        self._config = config
        self._serializer = serializer or TableSerializer()

    def __repr__(self) -> str:
        return f"TableInstance(id={self.instance_id!r}, dialect={self._dialect.value!r})"

    def dialect(self) -> TableDialect:
        """Get the table dialect."""
        return self._dialect

    def model(self) -> TableModel:
        """Get the table model."""
        return self._model

    def source(self) -> str:
        """Get the text the table was built from."""
        return self._source

    def config(self) -> TableRenderConfig:
        """Get the render options."""
        return self._config

    def to_markdown(self) -> str:
        """
        Get the table's textual form in its dialect.

        A table that has not been edited is returned exactly as it was read.

        Returns:
            The table text, ending with a single newline
        """
        if not self._model.is_modified():
            return self._source + '\n'

        return self._serializer.serialize(self._model, self._dialect)

    def notify_blur(self) -> None:
        """Report that editing focus has left the rendered table."""
        self._config.on_blur(self)
