#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbml/renderers/tables.py
"""Table layout and box-drawing output.

The node renderer collects rendered cells (each a list of lines) into rows;
:class:`TableLayout` then squares the grid, sizes the columns, optionally
shrinks the widest column to fit the target width, and writes the bordered
grid into a canvas.

"""

from __future__ import annotations

import logging

from bbml.canvas import Canvas
from bbml.constants import (
    TABLE_BOTTOM_INTERSECT,
    TABLE_BOTTOM_LEFT,
    TABLE_BOTTOM_RIGHT,
    TABLE_HORIZONTAL,
    TABLE_MID_INTERSECT,
    TABLE_MID_LEFT,
    TABLE_MID_RIGHT,
    TABLE_TOP_INTERSECT,
    TABLE_TOP_LEFT,
    TABLE_TOP_RIGHT,
    TABLE_VERTICAL,
)
from bbml.document import Line, StyledRun, lines_width
from bbml.utils.text import wrap_lines_to_width

logger = logging.getLogger(__name__)

Cell = list[Line]
Row = list[Cell]


def border_run(column_widths: list[int], left: str, intersect: str, right: str) -> StyledRun:
    """Build one horizontal border line sized to the column widths."""
    segments = [TABLE_HORIZONTAL * width for width in column_widths]
    return StyledRun(left + intersect.join(segments) + right)


class TableLayout:
    """Size and emit a table of pre-rendered cells.

    Parameters
    ----------
    rows : list of Row
        Cells by row; rows may have different lengths
    target_width : int
        Column budget the table should fit within

    Attributes
    ----------
    rows : list of Row
        Rows padded with empty cells to a common column count
    column_widths : list of int
        Final width of each column (after any shrink)
    row_heights : list of int
        Line count of the tallest cell in each row

    """

    def __init__(self, rows: list[Row], target_width: int):
        column_count = max((len(row) for row in rows), default=0)
        self.rows: list[Row] = [row + [[] for _ in range(column_count - len(row))] for row in rows]
        self.column_widths = [
            max(lines_width(row[column]) for row in self.rows) for column in range(column_count)
        ]
        self.shrink_to_fit(target_width)
        self.row_heights = [max(len(cell) for cell in row) for row in self.rows]

    @property
    def total_width(self) -> int:
        """Width including one border character around and between every column."""
        return sum(self.column_widths) + len(self.column_widths) + 1

    def shrink_to_fit(self, target_width: int) -> None:
        """Shrink the widest column so the table fits ``target_width``, if it can.

        Only the single widest column is considered (the rightmost one on a
        tie) and only one pass is made: when that column is not wider than the
        overflow, the table is left at its natural width.
        """
        if not self.column_widths:
            return

        overflow = self.total_width - target_width
        widest = 0
        for column, width in enumerate(self.column_widths):
            if width >= self.column_widths[widest]:
                widest = column
        widest_width = self.column_widths[widest]

        if overflow <= 0 or widest_width <= overflow:
            return

        new_width = widest_width - overflow
        logger.debug("Shrinking table column %d from %d to %d", widest, widest_width, new_width)
        self.column_widths[widest] = new_width
        for row in self.rows:
            wrap_lines_to_width(row[widest], new_width)

    def emit(self, canvas: Canvas) -> None:
        """Write the bordered grid into ``canvas``, starting on a fresh line."""
        if not self.rows:
            return

        widths = self.column_widths
        canvas.ensure_blank_separator()
        canvas.append_run(border_run(widths, TABLE_TOP_LEFT, TABLE_TOP_INTERSECT, TABLE_TOP_RIGHT))

        for row_index, (row, height) in enumerate(zip(self.rows, self.row_heights)):
            reserved = canvas.reserve_lines(height, StyledRun(TABLE_VERTICAL))

            for cell, width in zip(row, widths):
                for line, target in zip(cell, reserved):
                    target.runs.extend(line.runs)
                    if line.width < width:
                        target.append(StyledRun(" " * (width - line.width)))
                for target in reserved[len(cell) :]:
                    target.append(StyledRun(" " * width))
                for target in reserved:
                    target.append(StyledRun(TABLE_VERTICAL))

            if row_index < len(self.rows) - 1:
                canvas.ensure_blank_separator()
                canvas.append_run(border_run(widths, TABLE_MID_LEFT, TABLE_MID_INTERSECT, TABLE_MID_RIGHT))

        canvas.ensure_blank_separator()
        canvas.append_run(border_run(widths, TABLE_BOTTOM_LEFT, TABLE_BOTTOM_INTERSECT, TABLE_BOTTOM_RIGHT))
