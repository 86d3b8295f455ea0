"""Line-by-line tracking of the syntax mode of a Markdown document."""

from dataclasses import dataclass
from typing import List, Sequence

from mdtable.mdtable_types import TextMode


@dataclass
class MarkdownModeState:
    """
    Mode state carried from one line to the next.

    Attributes:
        in_fence_block: Indicates if we're currently inside a code fence block
        fence: The fence string that opened the current block
        fence_depth: Indentation of the opening fence
        in_frontmatter: Indicates if we're currently inside a frontmatter block
    """
    in_fence_block: bool = False
    fence: str = ""
    fence_depth: int = 0
    in_frontmatter: bool = False


@dataclass
class LineModes:
    """
    Modes for a single line.

    The mode at the start of a line can differ from the mode at its end: the
    closing delimiter of a frontmatter block still belongs to the frontmatter
    until its final character has been consumed.

    Attributes:
        start: Mode for every character of the line
        end: Mode once the whole line has been consumed
        length: Length of the line
    """
    start: TextMode
    end: TextMode
    length: int = 0


class MarkdownModeTracker:
    """
    Computes the syntax mode for every line of a Markdown document.

    Recognizes YAML frontmatter (a `---` first line closed by `---` or `...`)
    and fenced code blocks opened with three or more backticks or tildes.
    """

    def __init__(self) -> None:
        self._modes: List[LineModes] = []

    def update(self, lines: Sequence[str]) -> None:
        """
        Recompute line modes for a document.

        Args:
            lines: The document's lines, without line terminators
        """
        self._modes = []
        state = MarkdownModeState()
        has_frontmatter = self._has_frontmatter(lines)

        for index, line in enumerate(lines):
            if index == 0 and has_frontmatter:
                state.in_frontmatter = True
                self._modes.append(LineModes(TextMode.FRONTMATTER, TextMode.FRONTMATTER))
                continue

            self._modes.append(self._parse_line(state, line))

    def mode_at(self, line: int, ch: int) -> TextMode:
        """
        Get the mode at a character position.

        Args:
            line: Line index
            ch: Character offset within the line

        Returns:
            The syntax mode at that position

        Raises:
            IndexError: If the line index is out of range
        """
        if line < 0:
            raise IndexError(f"Line index out of range: {line}")

        modes = self._modes[line]
        if modes.start == modes.end:
            return modes.start

        return modes.end if ch >= modes.length else modes.start

    def _parse_line(self, state: MarkdownModeState, line: str) -> LineModes:
        stripped = line.lstrip()
        depth = len(line) - len(stripped)

        if state.in_frontmatter:
            if line.rstrip() in ('---', '...'):
                state.in_frontmatter = False
                return LineModes(TextMode.FRONTMATTER, TextMode.MARKDOWN, len(line))

            return LineModes(TextMode.FRONTMATTER, TextMode.FRONTMATTER)

        if state.in_fence_block:
            # Only close the fence if indentation is less than or equal to opening fence
            if depth <= state.fence_depth and self._closes_fence(state.fence, stripped.rstrip()):
                state.in_fence_block = False
                state.fence = ""
                state.fence_depth = 0
                return LineModes(TextMode.CODE, TextMode.MARKDOWN, len(line))

            return LineModes(TextMode.CODE, TextMode.CODE)

        fence = self._read_fence(stripped)
        if fence and depth < 4:
            state.in_fence_block = True
            state.fence = fence
            state.fence_depth = depth
            return LineModes(TextMode.MARKDOWN, TextMode.CODE, len(line))

        return LineModes(TextMode.MARKDOWN, TextMode.MARKDOWN)

    @staticmethod
    def _read_fence(stripped: str) -> str:
        """Return the fence marker at the start of a line, or an empty string."""
        if not stripped or stripped[0] not in ('`', '~'):
            return ""

        marker = stripped[0]
        length = len(stripped) - len(stripped.lstrip(marker))
        if length < 3:
            return ""

        return marker * length

    @staticmethod
    def _has_frontmatter(lines: Sequence[str]) -> bool:
        if not lines or lines[0].rstrip() != '---':
            return False

        return any(line.rstrip() in ('---', '...') for line in lines[1:])

    @staticmethod
    def _closes_fence(fence: str, stripped: str) -> bool:
        """Return True if a line closes a block opened with the given fence."""
        return len(stripped) >= len(fence) and stripped == fence[0] * len(stripped)
