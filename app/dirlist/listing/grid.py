"""Grid layout engine for name-only listings.

Two packers share the same column width (longest name plus spacing):

- Down-then-across: a fixed number of columns filled column-major.
- Across: greedy row-major packing that wraps when the next padded
  name would overflow the terminal.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_SPACING = 2


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """Column arrangement for a down-then-across grid.

    Attributes:
        column_width: Width of each padded cell.
        columns: Number of columns.
        rows: Number of rows.
    """

    column_width: int
    columns: int
    rows: int

    def index_at(self, row: int, column: int) -> int:
        """Flat name index shown at a cell (column-major)."""
        return column * self.rows + row


def column_width_for(names: Sequence[str], spacing: int = DEFAULT_SPACING) -> int:
    """Compute the padded cell width: longest name plus spacing, at least 1."""
    longest = max((len(name) for name in names), default=0)
    return max(1, longest + spacing)


def compute_geometry(
    count: int, column_width: int, terminal_width: int
) -> GridGeometry:
    """Fit a down-then-across grid into the terminal width.

    Args:
        count: Number of names to place.
        column_width: Padded cell width.
        terminal_width: Available terminal columns.

    Returns:
        GridGeometry with at least one column; rows is 0 when count is 0.
    """
    columns = max(1, terminal_width // column_width)
    rows = math.ceil(count / columns)
    return GridGeometry(column_width=column_width, columns=columns, rows=rows)


def render_columns(
    names: Sequence[str], terminal_width: int, spacing: int = DEFAULT_SPACING
) -> list[str]:
    """Lay out names down-then-across.

    Cells whose index falls past the end are left blank. Every populated
    cell but the last in its row is padded to the column width; the last
    is printed bare.

    Args:
        names: Sorted names.
        terminal_width: Available terminal columns.
        spacing: Gap between columns.

    Returns:
        One string per row (empty list for no names).
    """
    if not names:
        return []

    geometry = compute_geometry(len(names), column_width_for(names, spacing), terminal_width)
    lines: list[str] = []
    for row in range(geometry.rows):
        cells: list[str] = []
        for column in range(geometry.columns):
            index = geometry.index_at(row, column)
            if index < len(names):
                cells.append(names[index])
        padded = [f"{cell:<{geometry.column_width}}" for cell in cells[:-1]]
        lines.append("".join([*padded, cells[-1]]))
    return lines


def render_across(
    names: Sequence[str], terminal_width: int, spacing: int = DEFAULT_SPACING
) -> list[str]:
    """Lay out names left to right, wrapping greedily.

    The first name on a line is printed bare and counts its own length;
    each later name is padded to the column width. A new line starts when
    adding another padded cell would make the line wider than the
    terminal. Lines are never rebalanced.

    Args:
        names: Sorted names.
        terminal_width: Available terminal columns.
        spacing: Gap between columns.

    Returns:
        One string per output line (empty list for no names).
    """
    if not names:
        return []

    width = column_width_for(names, spacing)
    lines: list[str] = []
    current = names[0]
    used = len(current)
    for name in names[1:]:
        if used + width > terminal_width:
            lines.append(current)
            current = name
            used = len(name)
        else:
            current += f"{name:<{width}}"
            used += width
    lines.append(current)
    return lines
