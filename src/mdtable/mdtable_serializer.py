"""Conversion of table models into table text."""

import logging
from typing import List

from mdtable.mdtable_model import TableModel
from mdtable.mdtable_types import TableAlignment, TableDialect


class TableSerializer:
    """Serializer for simple, grid and pipe tables."""

    def __init__(self) -> None:
        """Initialize the serializer."""
        self._logger = logging.getLogger("TableSerializer")

    def serialize(self, model: TableModel, dialect: TableDialect) -> str:
        """
        Serialize a table.

        Args:
            model: Table to serialize
            dialect: Table dialect to produce

        Returns:
            The table text, ending with a single newline
        """
        if dialect == TableDialect.PIPE:
            lines = self._pipe_lines(model)

        elif dialect == TableDialect.GRID:
            lines = self._grid_lines(model)

        else:
            lines = self._simple_lines(model)

        return '\n'.join(lines) + '\n'

    @staticmethod
    def _pad(text: str, width: int, alignment: TableAlignment) -> str:
        if alignment == TableAlignment.RIGHT:
            return text.rjust(width)

        if alignment == TableAlignment.CENTER:
            return text.center(width)

        return text.ljust(width)

    @staticmethod
    def _alignment_gap(alignment: TableAlignment) -> int:
        """Get the spare dashes a simple table column needs beyond its title to show its alignment."""
        if alignment == TableAlignment.CENTER:
            return 2

        if alignment in (TableAlignment.LEFT, TableAlignment.RIGHT):
            return 1

        return 0

    @staticmethod
    def _single_line(text: str) -> str:
        return ' '.join(part.strip() for part in text.split('\n') if part.strip())

    def _pipe_lines(self, model: TableModel) -> List[str]:
        alignments = model.alignments()
        rows = [
            [self._single_line(cell).replace('|', '\\|') for cell in row]
            for row in model.rows()
        ]
        if not model.has_header():
            rows.insert(0, [''] * model.column_count())

        widths = [
            max([3] + [len(row[c]) for row in rows]) for c in range(model.column_count())
        ]

        def format_row(row: List[str]) -> str:
            cells = [self._pad(cell, widths[c], alignments[c]) for c, cell in enumerate(row)]
            return '| ' + ' | '.join(cells) + ' |'

        separator = []
        for width, alignment in zip(widths, alignments):
            if alignment == TableAlignment.LEFT:
                separator.append(':' + '-' * (width - 1))

            elif alignment == TableAlignment.RIGHT:
                separator.append('-' * (width - 1) + ':')

            elif alignment == TableAlignment.CENTER:
                separator.append(':' + '-' * (width - 2) + ':')

            else:
                separator.append('-' * width)

        lines = [format_row(rows[0]), '| ' + ' | '.join(separator) + ' |']
        lines.extend(format_row(row) for row in rows[1:])
        return lines

    def _grid_lines(self, model: TableModel) -> List[str]:
        alignments = model.alignments()
        rows = model.rows()
        widths = [
            max([3] + [len(part) for row in rows for part in row[c].split('\n')])
            for c in range(model.column_count())
        ]

        def rule(fill: str, with_alignment: bool) -> str:
            segments = []
            for width, alignment in zip(widths, alignments):
                segment = fill * (width + 2)
                if with_alignment and alignment in (TableAlignment.LEFT, TableAlignment.CENTER):
                    segment = ':' + segment[1:]

                if with_alignment and alignment in (TableAlignment.RIGHT, TableAlignment.CENTER):
                    segment = segment[:-1] + ':'

                segments.append(segment)

            return '+' + '+'.join(segments) + '+'

        def format_row(row: List[str]) -> List[str]:
            cell_lines = [cell.split('\n') for cell in row]
            height = max(len(parts) for parts in cell_lines)
            result = []
            for i in range(height):
                cells = [
                    ' ' + self._pad(parts[i] if i < len(parts) else '', widths[c], alignments[c]) + ' '
                    for c, parts in enumerate(cell_lines)
                ]
                result.append('|' + '|'.join(cells) + '|')

            return result

        lines = [rule('-', not model.has_header())]
        for index, row in enumerate(rows):
            lines.extend(format_row(row))
            if index == 0 and model.has_header():
                lines.append(rule('=', True))

            else:
                lines.append(rule('-', False))

        return lines

    def _simple_lines(self, model: TableModel) -> List[str]:
        alignments = model.alignments()
        rows = [[self._single_line(cell) for cell in row] for row in model.rows()]

        # An empty row would read as the blank line that ends the table, so
        # empty rows are dropped and an empty header leaves the table headerless
        has_header = model.has_header() and any(rows[0])
        rows = [row for row in rows if any(row)]
        if not rows:
            self._logger.debug("Simple table has no text, writing it as a pipe table")
            return self._pipe_lines(model)

        # Alignment is carried by where the first row sits over the dashes.
        # An aligned column needs room to leave a gap on one side, and a
        # default column's dashes match its title so that both ends are flush.
        # Wider cells run on past the dashes into the space between columns.
        reference = rows[0]
        widths = []
        rules = []
        for c in range(model.column_count()):
            title = len(reference[c])
            widest = max([1] + [len(row[c]) for row in rows])
            rule = widest
            if title > 0 and alignments[c] == TableAlignment.DEFAULT:
                rule = title

            elif title > 0:
                widest = max(widest, title + self._alignment_gap(alignments[c]))
                rule = widest

            widths.append(widest)
            rules.append(rule)

        def format_row(row: List[str]) -> str:
            cells = [self._pad(cell, widths[c], alignments[c]) for c, cell in enumerate(row)]
            return '  '.join(cells).rstrip()

        dashes = '  '.join(('-' * rule).ljust(width) for rule, width in zip(rules, widths)).rstrip()
        lines = [format_row(row) for row in rows]
        if has_header:
            lines.insert(1, dashes)

        else:
            lines.insert(0, dashes)
            lines.append(dashes)

        return lines
