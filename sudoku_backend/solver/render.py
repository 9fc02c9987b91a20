"""Text layouts for printing a grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .grid import Grid

BOX_TOP = "╔═══╤═══╤═══╗"
BOX_MIDDLE = "╟───┼───┼───╢"
BOX_BOTTOM = "╚═══╧═══╧═══╝"


def _row_chunks(grid: "Grid", row: int) -> List[str]:
    chars = [grid.get(row * 9 + col).display_char() for col in range(9)]
    return ["".join(chars[0:3]), "".join(chars[3:6]), "".join(chars[6:9])]


def format_box(grid: "Grid") -> str:
    """
    Render a grid inside a box-drawing frame.

    Determined cells show their digit, open cells ``.`` and cells without
    candidates ``x``. The result has no trailing newline.
    """
    lines = [BOX_TOP]
    for row in range(9):
        if row in (3, 6):
            lines.append(BOX_MIDDLE)
        lines.append("║" + "│".join(_row_chunks(grid, row)) + "║")
    lines.append(BOX_BOTTOM)
    return "\n".join(lines)


def format_compact(grid: "Grid") -> str:
    """Render rows as ``435 269 781`` with a blank line between bands."""
    out = []
    for row in range(9):
        if row in (3, 6):
            out.append("\n")
        out.append(" ".join(_row_chunks(grid, row)) + "\n")
    return "".join(out)
