"""Settings for in-place table rendering."""

from dataclasses import dataclass, field
import json
import logging
from typing import Set

from mdtable.mdtable_types import TableDialect


DEFAULT_CONTAINER = "#editor"


@dataclass
class TableSettings:
    """
    Table rendering settings.

    Attributes:
        enabled: Whether tables are rendered at all
        container: Selector naming the element under which pointer and scroll
            tracking for rendered tables is scoped
        dialects: Table dialects that are rendered
    """
    enabled: bool = True
    container: str = DEFAULT_CONTAINER
    dialects: Set[TableDialect] = field(default_factory=lambda: set(TableDialect))

    @classmethod
    def create_default(cls) -> "TableSettings":
        """Create a new TableSettings object with default values."""
        return cls(
            enabled=True,
            container=DEFAULT_CONTAINER,
            dialects=set(TableDialect)
        )

    @classmethod
    def load(cls, path: str) -> "TableSettings":
        """
        Load table settings from file.

        Args:
            path: Path to the settings file

        Returns:
            TableSettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

            settings.enabled = bool(data.get("enabled", True))
            settings.container = data.get("container", DEFAULT_CONTAINER)

            if "dialects" in data:
                dialects = set()
                for name in data["dialects"]:
                    try:
                        dialects.add(TableDialect(name))

                    except ValueError:
                        logging.getLogger("TableSettings").warning("Ignoring unknown table dialect '%s'", name)

                settings.dialects = dialects or set(TableDialect)

        return settings

    def save(self, path: str) -> None:
        """
        Save table settings to file.

        Args:
            path: Path to save settings file
        """
        data = {
            "enabled": self.enabled,
            "container": self.container,
            "dialects": sorted(dialect.value for dialect in self.dialects)
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=4)
