"""Registry of rendered table instances."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Iterator, List

from mdtable.mdtable_binding import TableBinding
from mdtable.mdtable_instance import TableInstance


@dataclass
class RegisteredTable:
    """A rendered table and the binding that displays it."""
    instance: TableInstance
    binding: TableBinding


class TableRegistry:
    """
    Insertion-ordered collection of the tables rendered in one editing session.
    """

    def __init__(self) -> None:
        self._tables: Dict[str, RegisteredTable] = OrderedDict()

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, instance_id: object) -> bool:
        return instance_id in self._tables

    def __iter__(self) -> Iterator[RegisteredTable]:
        return iter(list(self._tables.values()))

    def add(self, instance: TableInstance, binding: TableBinding) -> None:
        """
        Register a rendered table.

        Args:
            instance: Table instance
            binding: Binding displaying the instance
        """
        self._tables[instance.instance_id] = RegisteredTable(instance, binding)

    def get(self, instance_id: str) -> RegisteredTable | None:
        """
        Look up a rendered table.

        Args:
            instance_id: ID of the table instance

        Returns:
            The registered table, or None if it is not registered
        """
        return self._tables.get(instance_id)

    def remove(self, instance_id: str) -> RegisteredTable | None:
        """
        Deregister a rendered table.

        Args:
            instance_id: ID of the table instance

        Returns:
            The registered table that was removed, or None if it was not registered
        """
        return self._tables.pop(instance_id, None)

    def prune(self) -> List[RegisteredTable]:
        """
        Deregister tables whose bindings no longer resolve.

        Returns:
            The tables that were removed
        """
        stale = [table for table in self._tables.values() if table.binding.resolve() is None]
        for table in stale:
            del self._tables[table.instance.instance_id]

        return stale
