"""Conversion of table text into table models."""

import re
from typing import List, Tuple

from mdtable.mdtable_exceptions import TableParseError
from mdtable.mdtable_heading import HeadingKind, classify_heading
from mdtable.mdtable_model import TableModel
from mdtable.mdtable_types import TableAlignment, TableDialect


class TableParser:
    """Parser for simple, grid and pipe tables."""

    _PIPE_SEPARATOR_CELL_RE = re.compile(r'^:?-+:?$')
    _GRID_RULE_RE = re.compile(r'^\+(?:[-=:]+\+)+$')
    _DASH_RUN_RE = re.compile(r'-+')

    def parse(self, text: str, dialect: TableDialect) -> TableModel:
        """
        Parse table text.

        Args:
            text: Lines of the table joined with newlines
            dialect: Table dialect to parse

        Returns:
            The parsed table

        Raises:
            TableParseError: If the text is not a well-formed table of the dialect
        """
        lines = text.split('\n')
        if len(lines) < 2:
            raise TableParseError(
                f"A {dialect.value} table needs at least two lines",
                {'dialect': dialect.value, 'line_count': len(lines)}
            )

        if dialect == TableDialect.PIPE:
            return self._parse_pipe(lines)

        if dialect == TableDialect.GRID:
            return self._parse_grid(lines)

        return self._parse_simple(lines)

    @staticmethod
    def split_pipe_row(line: str) -> List[str]:
        """
        Split a pipe table row into cells.

        Leading and trailing pipes are optional, and a backslash-escaped pipe
        does not split cells.

        Args:
            line: The row text

        Returns:
            Cell text with surrounding whitespace removed and escapes resolved
        """
        content = line.strip()
        if content.startswith('|'):
            content = content[1:]

        if content.endswith('|') and not content.endswith('\\|'):
            content = content[:-1]

        cells: List[str] = []
        current: List[str] = []
        i = 0
        while i < len(content):
            ch = content[i]
            if ch == '\\' and i + 1 < len(content) and content[i + 1] == '|':
                current.append('|')
                i += 2
                continue

            if ch == '|':
                cells.append(''.join(current).strip())
                current = []
                i += 1
                continue

            current.append(ch)
            i += 1

        cells.append(''.join(current).strip())
        return cells

    def _parse_pipe(self, lines: List[str]) -> TableModel:
        separator = self.split_pipe_row(lines[1])
        alignments: List[TableAlignment] = []
        for index, cell in enumerate(separator):
            if not self._PIPE_SEPARATOR_CELL_RE.match(cell):
                raise TableParseError(
                    f"Invalid separator cell {cell!r} in pipe table",
                    {'dialect': 'pipe', 'line': 1, 'column': index}
                )

            alignments.append(self._alignment_from_colons(cell))

        rows = [self.split_pipe_row(lines[0])]
        rows.extend(self.split_pipe_row(line) for line in lines[2:])
        return TableModel(rows, alignments, has_header=True)

    def _parse_grid(self, lines: List[str]) -> TableModel:
        top = lines[0].rstrip()
        if not self._GRID_RULE_RE.match(top):
            raise TableParseError("Grid table does not start with a rule", {'dialect': 'grid', 'line': 0})

        if not self._GRID_RULE_RE.match(lines[-1].rstrip()):
            raise TableParseError(
                "Grid table does not end with a rule",
                {'dialect': 'grid', 'line': len(lines) - 1}
            )

        boundaries = [i for i, ch in enumerate(top) if ch == '+']
        column_count = len(boundaries) - 1
        alignment_rule = top
        has_header = False
        rows: List[List[str]] = []
        current: List[List[str]] | None = None

        for line_num, raw_line in enumerate(lines[1:], start=1):
            line = raw_line.rstrip()
            if line.startswith('+'):
                if not self._GRID_RULE_RE.match(line):
                    raise TableParseError("Invalid rule in grid table", {'dialect': 'grid', 'line': line_num})

                if current is not None:
                    rows.append([self._join_cell_lines(cell_lines) for cell_lines in current])
                    current = None

                if '=' in line:
                    if has_header or len(rows) != 1:
                        raise TableParseError(
                            "Header rule must follow the first row of a grid table",
                            {'dialect': 'grid', 'line': line_num}
                        )

                    has_header = True
                    alignment_rule = line

                continue

            if not line.startswith('|') or len(line) != boundaries[-1] + 1 or \
                    any(line[b] != '|' for b in boundaries):
                raise TableParseError(
                    "Grid table row does not line up with its column rules",
                    {'dialect': 'grid', 'line': line_num}
                )

            if current is None:
                current = [[] for _ in range(column_count)]

            for column in range(column_count):
                current[column].append(line[boundaries[column] + 1:boundaries[column + 1]].strip())

        alignments = [
            self._alignment_from_colons(alignment_rule[boundaries[c] + 1:boundaries[c + 1]])
            for c in range(column_count)
        ]
        return TableModel(rows, alignments, has_header=has_header)

    @staticmethod
    def _join_cell_lines(cell_lines: List[str]) -> str:
        while cell_lines and not cell_lines[-1]:
            cell_lines = cell_lines[:-1]

        while cell_lines and not cell_lines[0]:
            cell_lines = cell_lines[1:]

        return '\n'.join(cell_lines)

    def _parse_simple(self, lines: List[str]) -> TableModel:
        headerless = classify_heading(lines[0]) == HeadingKind.SIMPLE
        if headerless:
            if len(lines) < 3 or classify_heading(lines[-1]) != HeadingKind.SIMPLE:
                raise TableParseError(
                    "Headerless simple table must be closed by a rule",
                    {'dialect': 'simple', 'line': len(lines) - 1}
                )

            rule = lines[0]
            header = None
            body = lines[1:-1]

        else:
            if classify_heading(lines[1]) != HeadingKind.SIMPLE:
                raise TableParseError(
                    "Simple table header must be followed by a rule",
                    {'dialect': 'simple', 'line': 1}
                )

            rule = lines[1]
            header = lines[0]
            body = lines[2:]

            # An optional closing rule
            if body and classify_heading(body[-1]) == HeadingKind.SIMPLE:
                body = body[:-1]

        runs = [(m.start(), m.end()) for m in self._DASH_RUN_RE.finditer(rule)]
        regions = self._simple_regions(runs)

        reference = header if header is not None else (body[0] if body else '')
        alignments = [
            self._simple_alignment(reference, region, run) for region, run in zip(regions, runs)
        ]

        rows = []
        if header is not None:
            rows.append(self._split_simple_row(header, regions))

        rows.extend(self._split_simple_row(line, regions) for line in body)
        return TableModel(rows, alignments, has_header=header is not None)

    @staticmethod
    def _simple_regions(runs: List[Tuple[int, int]]) -> List[Tuple[int, int | None]]:
        """
        Work out which characters of a row belong to each column.

        A column starts where its dashes start and runs up to where the next
        column's dashes start; the last column runs to the end of the line.
        """
        regions: List[Tuple[int, int | None]] = []
        for index, (start, _end) in enumerate(runs):
            left = 0 if index == 0 else start
            right = runs[index + 1][0] if index + 1 < len(runs) else None
            regions.append((left, right))

        return regions

    @staticmethod
    def _split_simple_row(line: str, regions: List[Tuple[int, int | None]]) -> List[str]:
        return [line[left:right].strip() for left, right in regions]

    @staticmethod
    def _simple_alignment(line: str, region: Tuple[int, int | None], run: Tuple[int, int]) -> TableAlignment:
        """
        Work out a column's alignment from where its text sits over the dashes.

        Args:
            line: Header row, or the first body row of a headerless table
            region: Characters belonging to the column
            run: Start and end of the column's dashes

        Returns:
            The column alignment
        """
        left, right = region
        segment = line[left:right]
        text = segment.strip()
        if not text:
            return TableAlignment.DEFAULT

        text_start = left + len(segment) - len(segment.lstrip())
        text_end = text_start + len(text)
        flush_left = text_start == run[0]
        flush_right = text_end == run[1]

        if flush_left and flush_right:
            return TableAlignment.DEFAULT

        if flush_left:
            return TableAlignment.LEFT

        if flush_right:
            return TableAlignment.RIGHT

        return TableAlignment.CENTER

    @staticmethod
    def _alignment_from_colons(cell: str) -> TableAlignment:
        cell = cell.strip()
        if len(cell) > 1 and cell.startswith(':') and cell.endswith(':'):
            return TableAlignment.CENTER

        if cell.endswith(':'):
            return TableAlignment.RIGHT

        if cell.startswith(':'):
            return TableAlignment.LEFT

        return TableAlignment.DEFAULT
