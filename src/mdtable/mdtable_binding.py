"""Bindings between table instances and host markers."""

from enum import Enum, auto
from typing import Any

from mdtable.mdtable_exceptions import TableBindingError
from mdtable.mdtable_host import TableHost
from mdtable.mdtable_types import LineRange


class BindingState(Enum):
    """Lifecycle state of a binding."""
    BOUND = auto()
    CLEARED = auto()


class TableBinding:
    """
    A host marker that shows a table instance in place of a range of lines.

    The host can drop a marker on its own (for instance when the covered
    text is deleted), so the binding checks the marker each time it is
    resolved and moves to CLEARED once the marker has gone.
    """

    def __init__(self, host: TableHost, marker: Any) -> None:
        """
        Initialize the binding.

        Args:
            host: Editor host owning the marker
            marker: Marker returned by the host
        """
        self._host = host
        self._marker = marker
        self._state = BindingState.BOUND

    def state(self) -> BindingState:
        """Get the binding state."""
        return self._state

    def is_bound(self) -> bool:
        """Return True if the binding has not been cleared."""
        return self._state == BindingState.BOUND

    def marker(self) -> Any:
        """
        Get the host marker.

        Raises:
            TableBindingError: If the binding has been cleared
        """
        if self._state == BindingState.CLEARED:
            raise TableBindingError("Binding has been cleared")

        return self._marker

    def resolve(self) -> LineRange | None:
        """
        Find the lines the binding currently covers.

        Returns:
            The covered lines, or None if the binding has been cleared
        """
        if self._state == BindingState.CLEARED:
            return None

        line_range = self._host.marker_range(self._marker)
        if line_range is None:
            self._state = BindingState.CLEARED

        return line_range

    def clear(self) -> None:
        """Clear the binding.  Clearing a cleared binding does nothing."""
        if self._state == BindingState.CLEARED:
            return

        self._host.clear_marker(self._marker)
        self._state = BindingState.CLEARED
