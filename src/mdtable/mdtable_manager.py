"""Management of the tables rendered in an editor."""

from dataclasses import dataclass, field
import logging
from typing import List

from mdtable.mdtable_binding import TableBinding
from mdtable.mdtable_commands import insert_table
from mdtable.mdtable_detector import TableSpanDetector
from mdtable.mdtable_exceptions import TableError
from mdtable.mdtable_factory import TableFactory
from mdtable.mdtable_host import TableHost
from mdtable.mdtable_instance import TableInstance, TableRenderConfig
from mdtable.mdtable_registry import TableRegistry
from mdtable.mdtable_settings import TableSettings
from mdtable.mdtable_types import LineRange, TableSpan
from mdtable.mdtable_validator import TableSpanValidator


@dataclass
class TableConstructionFailure:
    """A detected table that could not be converted."""
    span: TableSpan
    message: str
    error_details: dict | None = None


@dataclass
class TableRenderResult:
    """Result of a rendering pass."""
    rendered: List[TableSpan] = field(default_factory=list)
    failures: List[TableConstructionFailure] = field(default_factory=list)


class TableInstanceManager:
    """
    Renders the tables in an editor's viewport and writes edited tables back.

    Each rendering pass detects tables in the visible lines, converts the ones
    that are safe to replace, and binds their rendering handles over the
    original text.  When editing focus leaves a rendered table the table is
    written back as text, and the next pass renders it again from scratch.
    """

    def __init__(
        self,
        host: TableHost,
        factory: TableFactory | None = None,
        settings: TableSettings | None = None,
        registry: TableRegistry | None = None
    ) -> None:
        """
        Initialize the manager.

        Args:
            host: Editor host
            factory: Factory that builds table instances
            settings: Rendering settings
            registry: Registry of rendered tables for this editing session
        """
        self._logger = logging.getLogger("TableInstanceManager")
        self._host = host
        self._factory = factory or TableFactory()
        self._settings = settings or TableSettings.create_default()
        self._registry = registry if registry is not None else TableRegistry()
        self._detector = TableSpanDetector(host)
        self._validator = TableSpanValidator(host)
        self._config = TableRenderConfig(container=self._settings.container, on_blur=self.release)

    def registry(self) -> TableRegistry:
        """Get the registry of rendered tables."""
        return self._registry

    def settings(self) -> TableSettings:
        """Get the rendering settings."""
        return self._settings

    def render_tables(self) -> TableRenderResult:
        """
        Render the tables in the host's viewport.

        Returns:
            The spans rendered and the tables that could not be converted
        """
        result = TableRenderResult()

        for table in self._registry.prune():
            self._logger.debug("Dropped table %s: its binding has gone", table.instance.instance_id)

        if not self._settings.enabled:
            return result

        accepted: List[LineRange] = []
        for span in self._detector.detect(self._host.viewport()):
            if span.dialect not in self._settings.dialects:
                continue

            if not self._validator.accept(span, accepted):
                continue

            instance = self._construct(span, result)
            if instance is None:
                continue

            marker = self._host.mark_lines(span.line_range, instance.handle)
            self._registry.add(instance, TableBinding(self._host, marker))
            accepted.append(span.line_range)
            result.rendered.append(span)

        return result

    def _construct(self, span: TableSpan, result: TableRenderResult) -> TableInstance | None:
        """
        Convert a span's text into a table instance.

        Args:
            span: The span to convert
            result: Result of the current pass, to record any failure

        Returns:
            The new instance, or None if the table is malformed
        """
        text = self._host.line_text(span.line_range)
        try:
            return self._factory.construct(text, span.dialect, self._config)

        except TableError as e:
            self._logger.warning(
                "Could not instantiate table between %d and %d: %s",
                span.line_range.first, span.line_range.last, str(e)
            )
            result.failures.append(TableConstructionFailure(span, str(e), e.error_details))
            return None

    def release(self, instance: TableInstance) -> None:
        """
        Write a rendered table back into the document.

        Called when editing focus leaves the rendered table.  The binding is
        cleared and the instance deregistered before the text is replaced, so
        a rendering pass triggered by the replacement sees plain text only.

        Args:
            instance: The table instance losing focus
        """
        table = self._registry.get(instance.instance_id)
        if table is None:
            self._logger.debug("Ignoring release of unregistered table %s", instance.instance_id)
            return

        line_range = table.binding.resolve()
        if line_range is None:
            # Don't replace some arbitrary text somewhere in the document!
            self._logger.debug("Ignoring release of table %s: its binding has gone", instance.instance_id)
            self._registry.remove(instance.instance_id)
            return

        markdown = instance.to_markdown()
        if markdown.endswith('\n'):
            markdown = markdown[:-1]

        table.binding.clear()
        self._registry.remove(instance.instance_id)
        self._host.replace_lines(line_range, markdown.split('\n'))

    def clear(self) -> None:
        """Clear every binding and forget every rendered table."""
        for table in self._registry:
            table.binding.clear()
            self._registry.remove(table.instance.instance_id)

    def insert_table(self) -> None:
        """Insert an empty two-by-two table at the cursor."""
        insert_table(self._host)
