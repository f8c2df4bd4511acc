"""Table scanning for the block scanner.

Handles pipe tables:

    Name | Qty      <- header row
    -----|----      <- separator row (required)
    milk | 2        <- body rows

Rows are split independently; a row wider or narrower than the header is
kept as-is and renders ragged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mdpreview.nodes import Table

if TYPE_CHECKING:
    from collections.abc import Sequence


def split_table_row(line: str) -> tuple[str, ...]:
    """Split a table line on ``|`` and trim each cell.

    An empty first or last cell produced by an edge pipe is dropped; empty
    cells in between are kept.

    Examples:
        >>> split_table_row("| a | b |")
        ('a', 'b')
        >>> split_table_row("a||c")
        ('a', '', 'c')
    """
    cells = [cell.strip() for cell in line.split("|")]
    if cells and not cells[0]:
        cells.pop(0)
    if cells and not cells[-1]:
        cells.pop()
    return tuple(cells)


class TableScanningMixin:
    """Mixin for pipe table scanning.

    Required Host Attributes:
        - _lines: Sequence[str]
        - _pos: int

    """

    _lines: Sequence[str]
    _pos: int

    def _scan_table(self) -> Table:
        """Scan a table starting at the header line.

        The caller has already checked that the next line is a separator.
        """
        header = split_table_row(self._lines[self._pos])
        # Header and separator
        self._pos += 2

        rows: list[tuple[str, ...]] = []
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            if "|" not in line:
                break
            rows.append(split_table_row(line))
            self._pos += 1

        return Table(header=header, rows=tuple(rows))
