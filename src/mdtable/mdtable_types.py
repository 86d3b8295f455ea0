"""Shared types for table detection and rendering."""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Iterator


class TableDialect(Enum):
    """The three supported table grammars."""
    SIMPLE = "simple"
    GRID = "grid"
    PIPE = "pipe"


class TableAlignment(Enum):
    """Column alignment."""
    DEFAULT = "default"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextMode(IntEnum):
    """Syntax mode at a position in the document."""
    MARKDOWN = auto()
    CODE = auto()
    FRONTMATTER = auto()


@dataclass(frozen=True)
class LineRange:
    """
    Inclusive range of line indices.

    Attributes:
        first: Index of the first line
        last: Index of the last line
    """
    first: int
    last: int

    def __post_init__(self) -> None:
        if self.first > self.last:
            raise ValueError(f"Invalid line range: {self.first} > {self.last}")

    def __len__(self) -> int:
        return self.last - self.first + 1

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.first, self.last + 1))

    def contains(self, line: int) -> bool:
        """Return True if the line index falls within this range."""
        return self.first <= line <= self.last

    def overlaps(self, other: "LineRange") -> bool:
        """Return True if any line is shared with another range."""
        return self.first <= other.last and other.first <= self.last


@dataclass(frozen=True)
class TableSpan:
    """A detected table candidate: a line range tagged with its dialect."""
    line_range: LineRange
    dialect: TableDialect
