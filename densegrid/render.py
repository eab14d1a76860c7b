# densegrid/render.py
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Final, List

if TYPE_CHECKING:
    from densegrid.grid import GridLike

CELL_SEPARATOR: Final = " | "
CORNER: Final = "+"
RULE: Final = "-"


def render(grid: GridLike, fmt: Callable[[object], str] = str) -> str:
    """Draw ``grid`` as a boxed text table, one line per row.

    Every column is padded to its widest cell. A grid with no cells renders
    as an empty string.
    """
    if grid.height == 0 or grid.width == 0:
        return ""

    text: List[List[str]] = [
        [fmt(grid.get(r, c)) for c in range(grid.width)]
        for r in range(grid.height)
    ]
    widths = [max(len(row[c]) for row in text) for c in range(grid.width)]

    border = CORNER + CORNER.join(RULE * (w + 2) for w in widths) + CORNER
    lines = [border]
    for row in text:
        body = CELL_SEPARATOR.join(cell.ljust(w) for cell, w in zip(row, widths))
        lines.append(CELL_SEPARATOR.lstrip() + body + CELL_SEPARATOR.rstrip())
        lines.append(border)
    return "\n".join(lines)
